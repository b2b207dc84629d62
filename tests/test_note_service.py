from uuid import UUID, uuid4

import pytest
from pymongo.errors import DuplicateKeyError, WriteError
from pymongo.results import UpdateResult

from notemanager.api.schemas.note import CategoryIn, NoteIn
from notemanager.repositories import category_repo, note_repo
from notemanager.services import note_service


def _note(**kw) -> NoteIn:
    data = {"title": "Buy milk", "description": "2%", "category_id": "1"}
    data.update(kw)
    return NoteIn(**data)


# --- create ---

def test_create_generates_id_and_round_trips(db):
    res = note_service.create(_note())
    assert res.ok
    created = res.value
    assert isinstance(created.id, UUID)

    fetched = note_service.get_by_id(created.id)
    assert fetched.ok
    assert fetched.value == created


def test_create_keeps_supplied_id(db):
    note_id, owner = uuid4(), uuid4()
    res = note_service.create(_note(id=note_id, owner_id=owner))
    assert res.value.id == note_id
    assert note_service.get_by_id(note_id).value.owner_id == owner


def test_create_replaces_nil_id(db):
    res = note_service.create(_note(id=UUID(int=0)))
    assert res.ok
    assert res.value.id != UUID(int=0)


@pytest.mark.parametrize("field", ["title", "description"])
@pytest.mark.parametrize("blank", ["", "   ", None])
def test_create_incomplete(db, field, blank):
    res = note_service.create(_note(**{field: blank}))
    assert not res.ok
    assert res.error.kind == "incomplete"
    assert note_service.get_all().value == []


@pytest.mark.parametrize("category_id", ["0", "4", "9", "To Do", None])
def test_create_invalid_category(db, category_id):
    res = note_service.create(_note(title="X", description="y", category_id=category_id))
    assert res.error.kind == "invalid_category"
    assert res.error.message.startswith(f"Id {category_id or ''} is undefined")


def test_create_checks_completeness_before_category(db):
    res = note_service.create(_note(title="", category_id="9"))
    assert res.error.kind == "incomplete"


def test_create_duplicate_title_with_different_id(db):
    assert note_service.create(_note()).ok
    res = note_service.create(_note(id=uuid4(), description="other"))
    assert res.error.kind == "duplicate"
    assert "title" in res.error.message
    assert len(note_service.get_all().value) == 1


def test_create_duplicate_title_is_case_sensitive(db):
    assert note_service.create(_note(title="Buy milk")).ok
    assert note_service.create(_note(title="buy milk")).ok


def test_create_duplicate_id(db):
    note_id = uuid4()
    assert note_service.create(_note(id=note_id)).ok
    res = note_service.create(_note(id=note_id, title="Another title"))
    assert res.error.kind == "duplicate"
    assert "ID" in res.error.message


def test_create_duplicate_key_from_store_is_reported(db, monkeypatch):
    def _raise(doc):
        raise DuplicateKeyError("E11000 duplicate key")

    monkeypatch.setattr(note_repo, "insert", _raise)
    res = note_service.create(_note())
    assert res.error.kind == "duplicate"


def test_create_uses_explicit_accepted_set(db):
    assert note_service.create(_note(category_id="7"), accepted=("7",)).ok
    assert note_service.create(_note(title="t2", category_id="1"), accepted=("7",)).error.kind == "invalid_category"


# --- get ---

def test_get_by_id_not_found(db):
    missing = uuid4()
    res = note_service.get_by_id(missing)
    assert res.error.kind == "not_found"
    assert res.error.message == f"Note with id {missing} was not found"


def test_get_by_owner(db):
    owner = uuid4()
    note_service.create(_note(title="a", owner_id=owner))
    note_service.create(_note(title="b", owner_id=owner))
    note_service.create(_note(title="c", owner_id=uuid4()))

    titles = sorted(n.title for n in note_service.get_by_owner(owner).value)
    assert titles == ["a", "b"]
    assert note_service.get_by_owner(uuid4()).value == []


# --- update ---

def test_update_replaces_existing_note(db):
    created = note_service.create(_note()).value
    res = note_service.update(created.id, _note(id=uuid4(), title="Buy bread", category_id="3"))
    assert res.ok and res.value is True

    stored = note_service.get_by_id(created.id).value
    assert stored.title == "Buy bread"
    assert stored.category_id == "3"
    assert len(note_service.get_all().value) == 1


def test_update_incomplete(db):
    created = note_service.create(_note()).value
    res = note_service.update(created.id, _note(title="", description="x", category_id="2"))
    assert res.error.kind == "incomplete"


def test_update_whitespace_only_is_incomplete(db):
    res = note_service.update(uuid4(), _note(description="   "))
    assert res.error.kind == "incomplete"


def test_update_checks_category_before_completeness(db):
    res = note_service.update(uuid4(), _note(title="", category_id="9"))
    assert res.error.kind == "invalid_category"


def test_update_inserts_when_write_not_acknowledged(db, monkeypatch):
    monkeypatch.setattr(note_repo, "replace", lambda note_id, doc: UpdateResult({}, False))
    note_id = uuid4()

    res = note_service.update(note_id, _note())
    assert res.ok and res.value is False
    assert note_service.get_by_id(note_id).value.title == "Buy milk"


# --- delete ---

def test_delete_existing_note(db):
    created = note_service.create(_note()).value
    assert note_service.delete(created.id).value is True
    assert note_service.get_by_id(created.id).error.kind == "not_found"


def test_delete_missing_note(db):
    res = note_service.delete(uuid4())
    assert res.error.kind == "not_found"


# --- categories ---

def test_category_crud(db):
    assert note_service.get_all_categories().value == []

    created = note_service.create_category(CategoryIn(id="1", name="To Do"))
    assert created.ok
    assert created.value.name == "To Do"
    assert [c.id for c in note_service.get_all_categories().value] == ["1"]

    assert note_service.delete_category("1").value is True
    assert note_service.get_all_categories().value == []


def test_create_duplicate_category_fails(db):
    note_service.create_category(CategoryIn(id="1", name="To Do"))
    res = note_service.create_category(CategoryIn(id="1", name="Again"))
    assert res.error.kind == "failed"


def test_delete_missing_category_carries_id(db):
    res = note_service.delete_category("42")
    assert res.error.kind == "failed"
    assert res.error.message == "42"


def test_whitelist_is_independent_of_category_collection(db):
    note_service.create_category(CategoryIn(id="4", name="Blocked"))
    assert note_service.create(_note(category_id="4")).error.kind == "invalid_category"

    note_service.delete_category("4")
    assert note_service.create(_note(category_id="2")).ok


def test_store_errors_propagate():
    # Sin base inicializada el error no se convierte en Result
    with pytest.raises(RuntimeError):
        note_service.get_all()


def test_update_missing_id_returns_true_without_insert(db):
    res = note_service.update(uuid4(), _note(title="a", description="b"))
    assert res.ok and res.value is True
    assert note_service.get_all().value == []


def test_invalid_category_message_with_missing_category(db):
    res = note_service.create(_note(category_id=None))
    assert res.error.message == "Id  is undefined. Accepted values are 1,2,3."


def test_create_category_with_empty_id_is_inserted(db):
    res = note_service.create_category(CategoryIn(id="", name="x"))
    assert res.ok
    assert [c.id for c in note_service.get_all_categories().value] == [""]


def test_create_category_write_rejection_fails(db, monkeypatch):
    def _reject(doc):
        raise WriteError("Document failed validation", 121)

    monkeypatch.setattr(category_repo, "insert", _reject)
    res = note_service.create_category(CategoryIn(id="1", name="To Do"))
    assert res.error.kind == "failed"
