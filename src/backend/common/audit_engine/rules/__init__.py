from .dom_images_have_alt import DOM_IMAGES_HAVE_ALT
from .dom_inputs_have_labels import DOM_INPUTS_HAVE_LABELS
from .dom_buttons_have_text import DOM_BUTTONS_HAVE_TEXT
from .dom_anchors_have_text import DOM_ANCHORS_HAVE_TEXT
from .dom_color_contrast import DOM_COLOR_CONTRAST
from .dom_frames_have_titles import DOM_FRAMES_HAVE_TITLES
from .dom_page_has_title import DOM_PAGE_HAS_TITLE
from .dom_table_headers import DOM_TABLE_HEADERS
from .dom_fieldsets_have_legend import DOM_FIELDSETS_HAVE_LEGEND
from .dom_choices_grouped import DOM_CHOICES_GROUPED
from .dom_onclick_interactive_only import DOM_ONCLICK_INTERACTIVE_ONLY

# Catalog order: results are always reported in this order.
BUILTIN_RULES = (
    DOM_IMAGES_HAVE_ALT,
    DOM_INPUTS_HAVE_LABELS,
    DOM_BUTTONS_HAVE_TEXT,
    DOM_ANCHORS_HAVE_TEXT,
    DOM_COLOR_CONTRAST,
    DOM_FRAMES_HAVE_TITLES,
    DOM_PAGE_HAS_TITLE,
    DOM_TABLE_HEADERS,
    DOM_FIELDSETS_HAVE_LEGEND,
    DOM_CHOICES_GROUPED,
    DOM_ONCLICK_INTERACTIVE_ONLY,
)

__all__ = [
    "BUILTIN_RULES",
    "DOM_IMAGES_HAVE_ALT",
    "DOM_INPUTS_HAVE_LABELS",
    "DOM_BUTTONS_HAVE_TEXT",
    "DOM_ANCHORS_HAVE_TEXT",
    "DOM_COLOR_CONTRAST",
    "DOM_FRAMES_HAVE_TITLES",
    "DOM_PAGE_HAS_TITLE",
    "DOM_TABLE_HEADERS",
    "DOM_FIELDSETS_HAVE_LEGEND",
    "DOM_CHOICES_GROUPED",
    "DOM_ONCLICK_INTERACTIVE_ONLY",
]
