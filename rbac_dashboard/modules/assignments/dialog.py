"""
In-memory state of the "assign permissions to role" dialog.

closed -> role_selected (selection seeded from the persisted set)
       -> editing (toggles) -> committed | cancelled -> closed

Toggles never reach the store; only commit() does.
"""

from enum import Enum
from typing import List, Optional

from rbac_dashboard.modules.assignments.schemas import AssignmentMutationResponse, AssignmentOverview
from rbac_dashboard.modules.assignments.service import AssignmentService


class DialogState(str, Enum):
    CLOSED = "closed"
    ROLE_SELECTED = "role_selected"
    EDITING = "editing"


class DialogOutcome(str, Enum):
    COMMITTED = "committed"
    CANCELLED = "cancelled"


class DialogStateError(Exception):
    pass


class AssignmentDialog:
    def __init__(self, service: AssignmentService, overview: Optional[AssignmentOverview] = None):
        self.service = service
        self.overview = overview if overview is not None else service.get_overview()
        self.state = DialogState.CLOSED
        self.outcome: Optional[DialogOutcome] = None
        self.role_id = ""
        self._selection: List[str] = []

    @property
    def selection(self) -> List[str]:
        return list(self._selection)

    def open(self):
        self._reset()
        self.outcome = None

    def select_role(self, role_id: str):
        if not self.overview.has_role(role_id):
            raise DialogStateError(f"Unknown role {role_id}")
        self.role_id = role_id
        self._selection = [rp.permission_id for rp in self.overview.permissions_for(role_id)]
        self.state = DialogState.ROLE_SELECTED

    def toggle(self, permission_id: str, included: bool):
        if self.state == DialogState.CLOSED:
            raise DialogStateError("Select a role before choosing permissions")
        if included and permission_id not in self._selection:
            self._selection.append(permission_id)
        elif not included:
            self._selection = [pid for pid in self._selection if pid != permission_id]
        self.state = DialogState.EDITING

    def commit(self) -> AssignmentMutationResponse:
        if self.state == DialogState.CLOSED:
            raise DialogStateError("Select a role before committing")
        # On failure the dialog stays open with its pending selection
        response = self.service.commit_assignments(self.role_id, self._selection)
        self.overview = response.overview
        self._reset()
        self.outcome = DialogOutcome.COMMITTED
        return response

    def cancel(self):
        self._reset()
        self.outcome = DialogOutcome.CANCELLED

    def _reset(self):
        self.state = DialogState.CLOSED
        self.role_id = ""
        self._selection = []
