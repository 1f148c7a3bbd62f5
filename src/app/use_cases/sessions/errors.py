"""
Session error codes

Codes carried by ``Error`` values returned from session use cases. The API
layer maps each code to an HTTP status.
"""

# Malformed input, rejected before any write
VALIDATION_ERROR = "VALIDATION_ERROR"

# Authorization
NOT_COLLABORATORS = "NOT_COLLABORATORS"
NOT_A_PARTICIPANT = "NOT_A_PARTICIPANT"
CONFIRM_NOT_ALLOWED = "CONFIRM_NOT_ALLOWED"

SESSION_NOT_FOUND = "SESSION_NOT_FOUND"

# Transition not legal from the current status
INVALID_STATE_TRANSITION = "INVALID_STATE_TRANSITION"

# Store unreachable or failing
DEPENDENCY_ERROR = "DEPENDENCY_ERROR"
