"""Unit tests for entity identity and key prefixes."""

from __future__ import annotations

import pytest

from viewcache.kernel.identity import EntityIdentity, EntityKind, generate_id_component


class TestEntityKind:
    def test_for_identity(self) -> None:
        assert EntityKind.for_identity(False) is EntityKind.PATIENT
        assert EntityKind.for_identity(True) is EntityKind.CLIENT_PERSON

    @pytest.mark.parametrize(
        ("resource_type", "expected"),
        [
            ("Patient", EntityKind.PATIENT),
            ("Person", EntityKind.CLIENT_PERSON),
            ("ClientPerson", EntityKind.CLIENT_PERSON),
            (EntityKind.PATIENT, EntityKind.PATIENT),
            ("Observation", None),
            ("", None),
        ],
    )
    def test_from_resource_type(self, resource_type: object, expected: EntityKind | None) -> None:
        assert EntityKind.from_resource_type(resource_type) is expected  # type: ignore[arg-type]


class TestEntityIdentity:
    def test_prefix(self) -> None:
        assert EntityIdentity(EntityKind.PATIENT, "42").prefix == "Patient:42"

    def test_of_alternate(self) -> None:
        identity = EntityIdentity.of("7", True)
        assert identity.kind is EntityKind.CLIENT_PERSON
        assert identity.is_alternate

    def test_is_hashable_and_equal(self) -> None:
        assert {EntityIdentity.of("1", False), EntityIdentity.of("1", False)} == {EntityIdentity.of("1", False)}

    def test_frozen(self) -> None:
        identity = EntityIdentity.of("1", False)
        with pytest.raises(AttributeError):
            identity.id = "2"  # type: ignore[misc]


class TestGenerateIdComponent:
    def test_patient(self) -> None:
        assert generate_id_component("42", False) == "Patient:42"

    def test_client_person(self) -> None:
        assert generate_id_component("7", True) == "ClientPerson:7"

    def test_stable(self) -> None:
        assert generate_id_component("abc", True) == generate_id_component("abc", True)

    def test_kinds_never_collide(self) -> None:
        assert generate_id_component("42", False) != generate_id_component("42", True)
