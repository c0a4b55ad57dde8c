from uxguard.state.blocked import BlockedFunctionState, BlockedObserver

__all__ = ["BlockedFunctionState", "BlockedObserver"]
