"""
Tests for the in-memory assignment dialog
"""
import pytest
from fastapi import HTTPException

from rbac_dashboard.modules.assignments import (
    AssignmentDialog, DialogOutcome, DialogState, DialogStateError
)
from rbac_dashboard.modules.assignments.service import AssignmentService


@pytest.fixture
def dialog(seeded_store, admin_context):
    seeded_store.grant("Support Agent", "read:users", "write:users")
    dialog = AssignmentDialog(AssignmentService(seeded_store, admin_context))
    seeded_store.calls.clear()
    return dialog


def test_select_role_seeds_persisted_permissions(dialog, seeded_store):
    dialog.open()
    dialog.select_role(seeded_store.role_id("Support Agent"))

    assert dialog.state == DialogState.ROLE_SELECTED
    assert set(dialog.selection) == {
        seeded_store.permission_id("read:users"), seeded_store.permission_id("write:users")
    }


def test_toggles_stay_in_memory(dialog, seeded_store):
    dialog.select_role(seeded_store.role_id("Support Agent"))

    dialog.toggle(seeded_store.permission_id("write:users"), False)
    dialog.toggle(seeded_store.permission_id("read:roles"), True)
    dialog.toggle(seeded_store.permission_id("read:roles"), True)

    assert dialog.state == DialogState.EDITING
    assert dialog.selection == [seeded_store.permission_id("read:users"), seeded_store.permission_id("read:roles")]
    assert seeded_store.calls == []
    assert seeded_store.permission_names_for("Support Agent") == {"read:users", "write:users"}


def test_toggle_requires_a_role(dialog, seeded_store):
    with pytest.raises(DialogStateError):
        dialog.toggle(seeded_store.permission_id("read:users"), True)


def test_select_unknown_role(dialog):
    with pytest.raises(DialogStateError):
        dialog.select_role("missing")


def test_commit_persists_and_closes(dialog, seeded_store):
    role_id = seeded_store.role_id("Support Agent")
    dialog.select_role(role_id)
    dialog.toggle(seeded_store.permission_id("write:users"), False)

    response = dialog.commit()

    assert response.notifications[0].description == "Permissions assigned successfully"
    assert dialog.state == DialogState.CLOSED
    assert dialog.outcome == DialogOutcome.COMMITTED
    assert dialog.selection == []
    assert [rp.permission_name for rp in dialog.overview.permissions_for(role_id)] == ["read:users"]
    assert seeded_store.permission_names_for("Support Agent") == {"read:users"}


def test_cancel_discards_selection(dialog, seeded_store):
    dialog.select_role(seeded_store.role_id("Support Agent"))
    dialog.toggle(seeded_store.permission_id("read:users"), False)

    dialog.cancel()

    assert dialog.state == DialogState.CLOSED
    assert dialog.outcome == DialogOutcome.CANCELLED
    assert seeded_store.calls == []
    assert seeded_store.permission_names_for("Support Agent") == {"read:users", "write:users"}


def test_rejected_commit_keeps_dialog_open(dialog, seeded_store):
    dialog.select_role(seeded_store.role_id("Support Agent"))
    dialog.toggle(seeded_store.permission_id("read:users"), False)
    dialog.toggle(seeded_store.permission_id("write:users"), False)

    with pytest.raises(HTTPException) as excinfo:
        dialog.commit()

    assert excinfo.value.status_code == 400
    assert dialog.state == DialogState.EDITING
    assert seeded_store.calls == []


def test_commit_from_closed_is_rejected(dialog, seeded_store):
    with pytest.raises(DialogStateError):
        dialog.commit()
    assert seeded_store.calls == []
