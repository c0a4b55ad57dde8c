from uxguard.restrictions.flags import BASELINE, DEFINED_FLAGS, RestrictionFlags, parse_flags

__all__ = ["BASELINE", "DEFINED_FLAGS", "RestrictionFlags", "parse_flags"]
