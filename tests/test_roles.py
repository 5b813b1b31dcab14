"""Tests for app.services.roles: registry operations and the restrict-on-delete policy."""

import unittest
from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError

from app.models import Role
from app.services.errors import (
    DuplicateRoleName,
    FieldLengthViolation,
    NotFound,
    NullConstraintViolation,
    RoleInUse,
)
from app.services.roles import (
    create_role,
    delete_role,
    get_role,
    list_roles,
    role_exists,
)
from app.services.users import create_user, get_user
from tests.support import make_engine, make_sessionmaker


class RoleRegistryTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = make_engine()
        self.session = make_sessionmaker(self.engine)()

    def tearDown(self) -> None:
        self.session.close()
        self.engine.dispose()


class TestCreateRole(RoleRegistryTestCase):
    def test_create_and_exists(self) -> None:
        role = create_role(self.session, "writer")
        self.assertEqual(role.name, "writer")
        self.assertTrue(role_exists(self.session, role.id))
        self.assertFalse(role_exists(self.session, role.id + 1))

    def test_name_is_trimmed(self) -> None:
        self.assertEqual(create_role(self.session, "  reader ").name, "reader")

    def test_duplicate_name(self) -> None:
        create_role(self.session, "writer")
        with self.assertRaises(DuplicateRoleName):
            create_role(self.session, "writer")

    def test_blank_and_long_names(self) -> None:
        with self.assertRaises(NullConstraintViolation):
            create_role(self.session, None)
        with self.assertRaises(NullConstraintViolation):
            create_role(self.session, " ")
        with self.assertRaises(FieldLengthViolation):
            create_role(self.session, "r" * 51)

    def test_list_and_get(self) -> None:
        writer = create_role(self.session, "writer")
        reader = create_role(self.session, "reader")
        self.assertEqual([r.id for r in list_roles(self.session)], [writer.id, reader.id])
        self.assertEqual(get_role(self.session, reader.id).name, "reader")
        with self.assertRaises(NotFound):
            get_role(self.session, 99)


class TestDeleteRole(RoleRegistryTestCase):
    def test_delete_unused_role(self) -> None:
        role = create_role(self.session, "writer")
        role_id = role.id
        delete_role(self.session, role_id)
        self.assertFalse(role_exists(self.session, role_id))

    def test_delete_role_in_use_is_refused(self) -> None:
        role = create_role(self.session, "writer")
        user = create_user(self.session, "ann@example.com", "p", "Ann", role.id)

        with self.assertRaises(RoleInUse) as ctx:
            delete_role(self.session, role.id)
        self.assertEqual(ctx.exception.user_count, 1)
        self.assertTrue(role_exists(self.session, role.id))
        self.assertEqual(get_user(self.session, user.id).role_id, role.id)

    def test_delete_missing_role(self) -> None:
        with self.assertRaises(NotFound):
            delete_role(self.session, 5)

    def test_huge_ids_are_absent(self) -> None:
        self.assertFalse(role_exists(self.session, 2**70))
        with self.assertRaises(NotFound):
            get_role(self.session, 2**70)
        with self.assertRaises(NotFound):
            delete_role(self.session, 2**70)


class TestDeleteRoleUnit(unittest.TestCase):
    """delete_role with a mocked session: no delete is issued while users reference the role."""

    def test_refuses_and_rolls_back(self) -> None:
        session = MagicMock()
        session.get.return_value = Role(id=3, name="writer")
        session.query.return_value.filter.return_value.scalar.return_value = 2
        with self.assertRaises(RoleInUse) as ctx:
            delete_role(session, 3)
        self.assertEqual(ctx.exception.user_count, 2)
        session.delete.assert_not_called()
        session.commit.assert_not_called()
        session.rollback.assert_called_once()

    def test_deletes_when_unreferenced(self) -> None:
        session = MagicMock()
        role = Role(id=3, name="writer")
        session.get.return_value = role
        session.query.return_value.filter.return_value.scalar.return_value = 0
        delete_role(session, 3)
        session.delete.assert_called_once_with(role)
        session.commit.assert_called_once()

    def test_race_reports_recounted_users(self) -> None:
        session = MagicMock()
        session.get.return_value = Role(id=3, name="writer")
        session.query.return_value.filter.return_value.scalar.side_effect = [0, 4]
        session.commit.side_effect = IntegrityError("DELETE FROM roles", {}, Exception("FOREIGN KEY"))
        with self.assertRaises(RoleInUse) as ctx:
            delete_role(session, 3)
        self.assertEqual(ctx.exception.user_count, 4)
        session.rollback.assert_called_once()

    def test_race_without_known_count_omits_number(self) -> None:
        session = MagicMock()
        session.get.return_value = Role(id=3, name="writer")
        session.query.return_value.filter.return_value.scalar.side_effect = [0, 0]
        session.commit.side_effect = IntegrityError("DELETE FROM roles", {}, Exception("FOREIGN KEY"))
        with self.assertRaises(RoleInUse) as ctx:
            delete_role(session, 3)
        self.assertIsNone(ctx.exception.user_count)
        self.assertEqual(ctx.exception.message, "Role 3 is still assigned to users.")


if __name__ == "__main__":
    unittest.main()
