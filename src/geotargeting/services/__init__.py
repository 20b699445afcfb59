from .notices import Notice, NoticeFormatter, NoticeKind
from .selection_store import SelectionStore

__all__ = ["Notice", "NoticeFormatter", "NoticeKind", "SelectionStore"]
