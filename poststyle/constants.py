"""Constants and configuration for the poststyle composer."""

class ComposerConstants:
    """Central configuration constants for the composer."""

    # Document fields, in display order
    FIELDS = ("hook", "content", "cta")
    FIELD_LABELS = {
        "hook": "Hook",
        "content": "Content",
        "cta": "Call to action",
    }

    # History
    MAX_HISTORY = 50  # Committed undo steps kept before the oldest is dropped
    DEBOUNCE_DELAY = 0.5  # Inactivity (seconds) before a coalesced edit is committed

    # Post limits
    MAX_CHARS = 3000  # Character budget of a post
    PARAGRAPH_SEPARATOR = "\n\n"  # Joins non-blank fields in the merged post

    # Feed preview folds the post behind "see more"
    PREVIEW_MAX_LINES = 5
    PREVIEW_MAX_CHARS = 200
    SEE_MORE_LABEL = "\u2026see more"

    # Analytics
    WORDS_PER_MINUTE = 200
    MAX_SUGGESTIONS = 4

    # Drafts
    DRAFT_FILENAME = "draft.json"
    DRAFT_TEMP_SUFFIX = ".tmp"

    # Settings
    SETTINGS_FILENAME = "settings.json"
    APP_NAME = "poststyle"
    APP_AUTHOR = "poststyle"

    # Status messages
    NO_SELECTION_MESSAGE = "Select some text first"
    OVER_LIMIT_MESSAGE = "Post is {} characters over the limit"
    CONFIRM_TEMPLATE_MESSAGE = "Pick {} again to replace the current post"
