"""Unit tests for role capabilities and identity validation."""

import unittest
from dataclasses import dataclass
from typing import ClassVar

import pytest

from appstate import Data, Identity, InvalidIdentityError, Settings, identity_of
from appstate.codecs import JSON, YAML
from sample_types import MyConfiguration, MyData


@pytest.mark.usefixtures("isolated_roots")
class TestRoleLayout(unittest.TestCase):
    """Settings and Data resolve to different roots with different codecs."""

    def test_settings_use_config_root_and_yaml(self):
        directory = MyConfiguration.ensure_dir()

        self.assertEqual(directory.parts[-2:], ("museun", "foobar"))
        self.assertEqual(directory.parent.parent.name, "config")
        self.assertIs(MyConfiguration._codec, YAML)

    def test_data_use_data_root_and_json(self):
        directory = MyData.ensure_dir()

        self.assertEqual(directory.parts[-2:], ("museun", "foobar"))
        self.assertEqual(directory.parent.parent.name, "data")
        self.assertIs(MyData._codec, JSON)

    def test_same_identity_different_roles_do_not_collide(self):
        self.assertNotEqual(MyConfiguration.path().parent, MyData.path().parent)

    def test_ensure_dir_creates_missing_directories(self):
        directory = MyConfiguration.ensure_dir()
        self.assertTrue(directory.is_dir())

    def test_adopting_both_roles_is_rejected(self):
        with self.assertRaises(TypeError):

            class Both(Settings, Data):
                ORGANIZATION: ClassVar[str] = "org"
                APPLICATION: ClassVar[str] = "app"
                NAME: ClassVar[str] = "both.yaml"

    def test_subclass_of_a_role_type_keeps_its_role(self):
        @dataclass
        class Extended(MyConfiguration):
            extra: int = 0

        self.assertIs(Extended._codec, YAML)
        self.assertEqual(Extended.path(), MyConfiguration.path())

    def test_role_types_satisfy_identity_protocol(self):
        self.assertIsInstance(MyConfiguration(), Identity)
        self.assertIsInstance(MyData(), Identity)


class TestIdentityValidation(unittest.TestCase):
    """Identity constants must be non-empty single path components."""

    def _make(self, organization="org", application="app", name="state.yaml"):
        @dataclass
        class Candidate(Settings):
            ORGANIZATION: ClassVar[str] = organization
            APPLICATION: ClassVar[str] = application
            NAME: ClassVar[str] = name

        return Candidate

    def test_valid_identity(self):
        identity = identity_of(self._make())

        self.assertEqual(identity.organization, "org")
        self.assertEqual(identity.application, "app")
        self.assertEqual(identity.name, "state.yaml")

    def test_missing_constant(self):
        class NoName(Settings):
            ORGANIZATION: ClassVar[str] = "org"
            APPLICATION: ClassVar[str] = "app"

        with self.assertRaises(InvalidIdentityError) as ctx:
            identity_of(NoName)
        self.assertIn("NAME", str(ctx.exception))

    def test_empty_constant(self):
        with self.assertRaises(InvalidIdentityError):
            identity_of(self._make(application="  "))

    def test_non_string_constant(self):
        with self.assertRaises(InvalidIdentityError):
            identity_of(self._make(organization=42))

    def test_path_separators_rejected(self):
        for bad in ("a/b", "a\\b", "..", "."):
            with self.subTest(bad=bad):
                with self.assertRaises(InvalidIdentityError):
                    identity_of(self._make(name=bad))

    def test_invalid_identity_is_a_value_error(self):
        with self.assertRaises(ValueError):
            identity_of(self._make(name=""))

    def test_role_base_classes_have_no_identity(self):
        with self.assertRaises(InvalidIdentityError):
            Settings.path()
