"""Unit tests for ModelManager, including tag-driven wedding membership."""

from pathlib import Path

import pytest

from weddingbook.application import (
    PREDICATE_SHOW_ALL_PERSONS,
    AddressBook,
    GuiSettings,
    ModelManager,
    UserPrefs,
    WeddingBook,
)
from weddingbook.domain import (
    DuplicateEntityError,
    EntityNotFoundError,
    JobContainsKeywordsPredicate,
    Person,
    Tag,
    TagContainsKeywordsPredicate,
    Wedding,
    WeddingNameContainsKeywordsPredicate,
)


def _person(name: str, phone: str, tags=(), job: str = "") -> Person:
    return Person(
        name=name,
        phone=phone,
        email=f"{name.split()[0].lower()}@example.com",
        address="Jurong West",
        job=job,
        tags=[Tag(t) for t in tags],
    )


@pytest.fixture
def alice() -> Person:
    return _person("Alice Pauline", "+12025551234", tags=["Smith-Jones"], job="Florist")


@pytest.fixture
def wedding(alice) -> Wedding:
    return Wedding(name="Smith-Jones", date="2025-06-01", venue="Raffles", participants={alice})


@pytest.fixture
def model(alice, wedding) -> ModelManager:
    address_book = AddressBook()
    address_book.add_person(alice)
    wedding_book = WeddingBook()
    wedding_book.add_wedding(wedding)
    return ModelManager(address_book, UserPrefs(), wedding_book)


def _stored_wedding(model: ModelManager, name: str) -> Wedding:
    return next(w for w in model.get_wedding_book().get_wedding_list() if w.name == name)


# --- construction and prefs ---


def test_default_model_is_empty() -> None:
    model = ModelManager()
    assert list(model.get_filtered_person_list()) == []
    assert list(model.get_filtered_wedding_list()) == []
    assert model.get_user_prefs() == UserPrefs()


def test_user_prefs_are_stored_verbatim() -> None:
    model = ModelManager()
    model.set_gui_settings(GuiSettings(window_width=1024, window_height=768, window_x=5, window_y=10))
    model.set_address_book_file_path(Path("tmp/persons.json"))
    model.set_wedding_book_file_path(Path("tmp/weddings.json"))
    assert model.get_gui_settings() == GuiSettings(1024, 768, 5, 10)
    assert model.get_address_book_file_path() == Path("tmp/persons.json")
    assert model.get_wedding_book_file_path() == Path("tmp/weddings.json")

    other = ModelManager()
    other.set_user_prefs(model.get_user_prefs())
    assert other.get_user_prefs() == model.get_user_prefs()


def test_none_arguments_fail_before_any_change(model, alice) -> None:
    with pytest.raises(TypeError):
        model.has_person(None)
    with pytest.raises(TypeError):
        model.set_person(alice, None)
    with pytest.raises(TypeError):
        model.set_gui_settings(None)
    with pytest.raises(TypeError):
        model.update_filtered_person_list(None)
    assert list(model.get_filtered_person_list()) == [alice]


def test_model_copies_snapshots(alice) -> None:
    address_book = AddressBook()
    address_book.add_person(alice)
    model = ModelManager(address_book, UserPrefs(), WeddingBook())
    address_book.remove_person(alice)
    assert model.has_person(alice)


def test_equality(alice) -> None:
    address_book = AddressBook()
    address_book.add_person(alice)
    first = ModelManager(address_book, UserPrefs(), WeddingBook())
    second = ModelManager(address_book, UserPrefs(), WeddingBook())
    assert first == second
    second.update_filtered_person_list(lambda p: False)
    assert first != second
    assert first != ModelManager()


# --- persons ---


def test_has_person_vs_has_exact_person(model, alice) -> None:
    edited = _person("Alice Pauline", "+12025551234", tags=["Smith-Jones"], job="Baker")
    assert model.has_person(edited)
    assert not model.has_exact_person(edited)
    assert model.has_exact_person(alice)
    with pytest.raises(DuplicateEntityError):
        model.add_person(edited)


def test_add_person_resets_filter(model, alice) -> None:
    model.update_filtered_person_list(lambda p: False)
    bob = _person("Bob Choo", "+12025550001")
    model.add_person(bob)
    assert list(model.get_filtered_person_list()) == [alice, bob]


def test_filtered_person_list_with_keyword_predicates(model, alice) -> None:
    bob = _person("Bob Choo", "+12025550001", job="Photographer")
    model.add_person(bob)
    model.update_filtered_person_list(JobContainsKeywordsPredicate(["photographer"]))
    assert list(model.get_filtered_person_list()) == [bob]
    model.update_filtered_person_list(TagContainsKeywordsPredicate(["Smith-Jones"]))
    assert list(model.get_filtered_person_list()) == [alice]


def test_show_all_is_idempotent(model, alice) -> None:
    model.add_person(_person("Bob Choo", "+12025550001"))
    model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
    once = list(model.get_filtered_person_list())
    model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
    assert list(model.get_filtered_person_list()) == once


def test_filtered_view_sees_later_mutations(model, alice) -> None:
    persons = model.get_filtered_person_list()
    model.delete_person(alice)
    assert list(persons) == []


def test_delete_missing_person_raises(model) -> None:
    with pytest.raises(EntityNotFoundError):
        model.delete_person(_person("Nobody Here", "+12025550003"))


def test_delete_person_leaves_no_wedding_reference(model, alice) -> None:
    model.delete_person(alice)
    assert _stored_wedding(model, "Smith-Jones").participants == set()


# --- weddings ---


def test_wedding_crud_and_filter(model, wedding) -> None:
    lee_tan = Wedding(name="Lee-Tan", date="2025-09-09", venue="Fullerton")
    model.update_filtered_wedding_list(lambda w: False)
    model.add_wedding(lee_tan)
    assert list(model.get_filtered_wedding_list()) == [wedding, lee_tan]

    model.update_filtered_wedding_list(WeddingNameContainsKeywordsPredicate(["lee-tan"]))
    assert list(model.get_filtered_wedding_list()) == [lee_tan]

    moved = Wedding(name="Lee-Tan", date="2025-10-10", venue="Fullerton")
    assert model.has_wedding(moved)
    assert not model.has_exact_wedding(moved)
    model.set_wedding(lee_tan, moved)
    assert list(model.get_filtered_wedding_list()) == [moved]

    model.delete_wedding(moved)
    assert list(model.get_filtered_wedding_list()) == []
    with pytest.raises(DuplicateEntityError):
        model.add_wedding(Wedding(name="smith-jones", date="2030-01-01", venue="Elsewhere"))


# --- tag-wedding linkage ---


def test_get_weddings_for_tags_matches_by_name(model, wedding) -> None:
    matches = model.get_weddings_for_tags({Tag("Smith-Jones"), Tag("Unrelated")})
    assert matches == [wedding]


def test_get_weddings_for_tags_is_case_sensitive_text_match(model) -> None:
    assert model.get_weddings_for_tags([Tag("smith-jones")]) == []


def test_get_weddings_for_tags_repeats_per_matching_tag(model, wedding) -> None:
    assert model.get_weddings_for_tags([Tag("Smith-Jones"), Tag("Smith-Jones")]) == [
        wedding,
        wedding,
    ]


def test_get_weddings_for_tags_ignores_wedding_filter(model, wedding) -> None:
    model.update_filtered_wedding_list(lambda w: False)
    assert model.get_weddings_for_tags([Tag("Smith-Jones")]) == [wedding]


def test_edit_sync_swaps_participant_reference(model, alice) -> None:
    edited = _person("Alice Pauline", "+12025559999", tags=["Smith-Jones"], job="Florist")
    model.set_person(alice, edited)
    model.sync_person_edit(alice, edited)
    assert _stored_wedding(model, "Smith-Jones").participants == {edited}


def test_edit_sync_leaves_other_weddings_alone(model, alice) -> None:
    bob = _person("Bob Choo", "+12025550001", tags=["Lee-Tan"])
    model.add_person(bob)
    model.add_wedding(Wedding(name="Lee-Tan", date="2025-09-09", venue="Fullerton", participants={bob}))
    edited = _person("Alice Pauline", "+12025559999", tags=["Smith-Jones"])
    model.set_person(alice, edited)
    model.sync_person_edit(alice, edited)
    assert _stored_wedding(model, "Lee-Tan").participants == {bob}


def test_tag_removal_severs_only_named_weddings(model, alice) -> None:
    model.add_wedding(Wedding(name="Lee-Tan", date="2025-09-09", venue="Fullerton", participants={alice}))
    model.sync_person_tag_removal(alice, [Tag("Lee-Tan")])
    assert _stored_wedding(model, "Lee-Tan").participants == set()
    assert _stored_wedding(model, "Smith-Jones").participants == {alice}


def test_clear_all_tags_severs_membership(model, alice) -> None:
    edited = model.clear_all_tags(alice)
    assert _stored_wedding(model, "Smith-Jones").participants == set()
    assert edited.tags == frozenset()
    assert (edited.name, edited.phone, edited.email, edited.address, edited.job) == (
        alice.name,
        alice.phone,
        alice.email,
        alice.address,
        alice.job,
    )
    assert model.has_exact_person(edited)
    assert not model.has_exact_person(alice)


def test_clear_all_tags_swaps_untagged_memberships(model, alice) -> None:
    model.add_wedding(Wedding(name="Lee-Tan", date="2025-09-09", venue="Fullerton", participants={alice}))
    edited = model.clear_all_tags(alice)
    assert _stored_wedding(model, "Lee-Tan").participants == {edited}


def test_clear_all_tags_resets_person_filter(model, alice) -> None:
    model.update_filtered_person_list(lambda p: False)
    edited = model.clear_all_tags(alice)
    assert list(model.get_filtered_person_list()) == [edited]


def test_clear_all_tags_on_missing_person_changes_nothing(model, alice) -> None:
    stranger = _person("Nobody Here", "+12025550003", tags=["Smith-Jones"])
    with pytest.raises(EntityNotFoundError):
        model.clear_all_tags(stranger)
    assert _stored_wedding(model, "Smith-Jones").participants == {alice}


def test_edit_person_drops_only_removed_tag_memberships(model, alice) -> None:
    model.add_wedding(Wedding(name="Lee-Tan", date="2025-09-09", venue="Fullerton"))
    both = model.assign_person_to_wedding(
        alice, Wedding(name="Lee-Tan", date="2025-09-09", venue="Fullerton")
    )
    assert both.tag_names == {"Smith-Jones", "Lee-Tan"}

    edited = both.with_tags(["Lee-Tan"])
    model.edit_person(both, edited)
    assert _stored_wedding(model, "Smith-Jones").participants == set()
    assert _stored_wedding(model, "Lee-Tan").participants == {edited}
    assert list(model.get_address_book().get_person_list()) == [edited]


def test_edit_person_duplicate_changes_nothing(model, alice) -> None:
    bob = _person("Bob Choo", "+12025550001")
    model.add_person(bob)
    clash = _person("Bob Choo", "+12025550001", tags=["x"])
    with pytest.raises(DuplicateEntityError):
        model.edit_person(alice, clash)
    assert _stored_wedding(model, "Smith-Jones").participants == {alice}


def test_assign_person_to_wedding(model) -> None:
    bob = _person("Bob Choo", "+12025550001")
    model.add_person(bob)
    assigned = model.assign_person_to_wedding(bob, Wedding(name="Smith-Jones", date="2025-06-01", venue="x"))
    assert assigned.tag_names == {"Smith-Jones"}
    assert bob not in _stored_wedding(model, "Smith-Jones").participants
    assert assigned in _stored_wedding(model, "Smith-Jones").participants


def test_assign_person_to_missing_wedding_raises(model, alice) -> None:
    with pytest.raises(EntityNotFoundError):
        model.assign_person_to_wedding(alice, Wedding(name="Nope", date="2025-06-01", venue="x"))
    assert model.has_exact_person(alice)


def test_assign_person_to_multiword_wedding(model, alice) -> None:
    model.add_wedding(Wedding(name="Tan-Lim Garden Party", date="2025-11-11", venue="Botanic"))
    assigned = model.assign_person_to_wedding(
        alice, Wedding(name="Tan-Lim Garden Party", date="2025-11-11", venue="Botanic")
    )
    assert "Tan-Lim Garden Party" in assigned.tag_names
    assert _stored_wedding(model, "Tan-Lim Garden Party").participants == {assigned}
    assert model.get_weddings_for_tags(assigned.tags) == [
        _stored_wedding(model, "Smith-Jones"),
        _stored_wedding(model, "Tan-Lim Garden Party"),
    ]
