from .tree import DomSnapshotAdapterError, load_snapshot, tree_from_payload

__all__ = ["DomSnapshotAdapterError", "load_snapshot", "tree_from_payload"]
