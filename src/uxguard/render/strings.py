"""User-facing strings of the driver screen."""

NO_FUNCTION_BLOCKED = "No function blocked"
SAFETY_MODE_ACTIVE = "Safety mode active"
FUNCTIONS_BLOCKED = "The following functions are blocked:"
STATUS_AUTO_UPDATED = "Status is updated automatically by the vehicle"

INFO_TEXT_LONG = (
    "This application follows the driving state reported by the vehicle. While the "
    "vehicle requires distraction optimization, calls, messaging, video playback and "
    "keyboard input can be blocked, and long texts like this one are shortened so that "
    "they can be read at a glance without taking attention away from the road."
)
