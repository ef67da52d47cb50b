from typing import Callable, TYPE_CHECKING


# Forward declaration for ObjectiveFn typing to avoid circular imports:
if TYPE_CHECKING:
    from pushbox.state import State

EntityID = str

ObjectiveFn = Callable[["State"], bool]
