from rbac_dashboard.modules.assignments.dialog import (
    AssignmentDialog, DialogOutcome, DialogState, DialogStateError
)

__all__ = ["AssignmentDialog", "DialogOutcome", "DialogState", "DialogStateError"]
