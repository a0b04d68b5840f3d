"""ARIA role catalog.

Every role the library knows about, as a module-level constant. Data follows
WAI-ARIA 1.1 and 1.2 (https://www.w3.org/TR/wai-aria-1.2/) with a few
additions from Graphics ARIA.

Catalog Layout:
├── Widget roles (button, checkbox, combobox, ...)
├── Document structure roles (article, cell, heading, list, ...)
├── Landmark roles (banner, main, navigation, region, ...)
├── Window roles (dialog, alertdialog)
└── ARIA 1.2 text-level roles (code, emphasis, strong, ...)

Two collections index the constants:

- EXPLICIT_ROLES: names accepted by explicit lookup (``role="..."``).
- ALL_ROLES: every definition, including the ones only reachable through
  implicit-role inference or concept matching (e.g. ``complementary``).

Thread Safety:
All definitions are frozen dataclasses. Safe to share across threads.

"""

from ariaroles.definition import Concept, RoleDefinition

# Properties shared by the text input roles
_TEXTBOX_PROPERTIES: tuple[tuple[str, bool], ...] = (
    ("aria-activedescendant", False),
    ("aria-autocomplete", False),
    ("aria-multiline", False),
    ("aria-placeholder", False),
    ("aria-readonly", False),
    ("aria-required", False),
)

_RANGE_PROPERTIES: tuple[tuple[str, bool], ...] = (
    ("aria-valuemax", True),
    ("aria-valuemin", True),
    ("aria-valuenow", True),
)

# =============================================================================
# Widget Roles
# =============================================================================

# aria-expanded is listed twice upstream; kept as-is, first entry wins
BUTTON = RoleDefinition(
    name="button",
    properties=(("aria-expanded", False), ("aria-expanded", False)),
    super_roles=("roletype", "widget", "command"),
    concepts=(Concept("button"), Concept("input", (("type", "button"),))),
)

CHECKBOX = RoleDefinition(
    name="checkbox",
    properties=(("aria-checked", True), ("aria-readonly", False)),
    super_roles=("switch", "menuitemcheckbox", "widget"),
    concepts=(Concept("input", (("type", "checkbox"),)),),
)

RADIO = RoleDefinition(
    name="radio",
    properties=(("aria-checked", True), ("aria-readonly", False)),
    super_roles=("menuitemradio", "widget"),
    concepts=(Concept("input", (("type", "radio"),)),),
)

SWITCH = RoleDefinition(
    name="switch",
    properties=(("aria-checked", True),),
    super_roles=("checkbox", "widget"),
)

OPTION = RoleDefinition(
    name="option",
    properties=(("aria-selected", True),),
    super_roles=("treeitem", "widget"),
    concepts=(Concept("option"),),
)

COMBOBOX = RoleDefinition(
    name="combobox",
    properties=(("aria-controls", True), ("aria-expanded", True)),
    super_roles=("select", "widget"),
    concepts=(Concept("select"),),
)

SPINBUTTON = RoleDefinition(
    name="spinbutton",
    properties=_RANGE_PROPERTIES,
    super_roles=("composite", "input", "range", "widget"),
    concepts=(Concept("hr"),),
)

SLIDER = RoleDefinition(
    name="slider",
    properties=_RANGE_PROPERTIES,
    super_roles=("input", "range", "widget"),
)

SEPARATOR = RoleDefinition(
    name="separator",
    properties=_RANGE_PROPERTIES,
    super_roles=("structure", "widget"),
    concepts=(Concept("hr"),),
)

SCROLLBAR = RoleDefinition(
    name="scrollbar",
    properties=(
        *_RANGE_PROPERTIES,
        ("aria-orientation", True),
        ("aria-controls", True),
    ),
    super_roles=("range", "widget"),
)

GRIDCELL = RoleDefinition(
    name="gridcell",
    properties=(("aria-readonly", False), ("aria-required", False), ("aria-selected", False)),
    super_roles=("cell", "widget"),
    concepts=(Concept("td"),),
)

LINK = RoleDefinition(
    name="link",
    properties=(("aria-expanded", False),),
    super_roles=("command", "widget"),
    concepts=(Concept("a"), Concept("link")),
)

LISTBOX = RoleDefinition(
    name="listbox",
    super_roles=("select", "widget"),
    concepts=(Concept("select"),),
)

MENUITEM = RoleDefinition(
    name="menuitem",
    properties=(("aria-posinset", False), ("aria-setsize", False)),
    super_roles=("command", "widget"),
)

MENUITEMCHECKBOX = RoleDefinition(
    name="menuitemcheckbox",
    properties=(("aria-checked", True),),
    super_roles=("checkbox", "menuitem", "widget"),
)

MENUITEMRADIO = RoleDefinition(
    name="menuitemradio",
    properties=(("aria-checked", True),),
    super_roles=("radio", "menuitemcheckbox", "widget"),
)

PROGRESSBAR = RoleDefinition(
    name="progressbar",
    properties=(("aria-valuenow", True), ("aria-valuemin", True), ("aria-valuemax", True)),
    super_roles=("range", "widget"),
)

ROW = RoleDefinition(
    name="row",
    properties=(
        ("aria-colindex", False),
        ("aria-level", False),
        ("aria-rowindex", False),
        ("aria-selected", False),
    ),
    super_roles=("group", "widget"),
    concepts=(Concept("tr"),),
)

SEARCHBOX = RoleDefinition(
    name="searchbox",
    properties=_TEXTBOX_PROPERTIES,
    super_roles=("textbox", "widget"),
    concepts=(Concept("input", (("type", "search"),)),),
)

TAB = RoleDefinition(
    name="tab",
    properties=(("aria-posinset", False), ("aria-selected", False), ("aria-setsize", False)),
    super_roles=("sectionhead", "widget"),
)

TEXTBOX = RoleDefinition(
    name="textbox",
    properties=_TEXTBOX_PROPERTIES,
    super_roles=("input", "widget"),
    concepts=(Concept("textarea"), Concept("input", (("type", "search"),))),
)

# =============================================================================
# Composite Roles (not widgets themselves)
# =============================================================================

GRID = RoleDefinition(
    name="grid",
    properties=(
        ("aria-level", False),
        ("aria-multiselectable", False),
        ("aria-readonly", False),
    ),
    super_roles=("composite", "table"),
    concepts=(Concept("table"),),
)

MENU = RoleDefinition(
    name="menu",
    properties=(("aria-posinset", False), ("aria-setsize", False)),
    super_roles=("select",),
)

MENUBAR = RoleDefinition(
    name="menubar",
    super_roles=("toolbar",),
)

RADIOGROUP = RoleDefinition(
    name="radiogroup",
    properties=(("aria-readonly", False), ("aria-required", False)),
    super_roles=("range",),
)

# Registered upstream as "tablelist"; lookups of "tablist" do not match
TABLELIST = RoleDefinition(
    name="tablelist",
    properties=(
        ("aria-level", False),
        ("aria-multiselectable", False),
        ("aria-orientation", False),
    ),
    super_roles=("composite",),
)

TREE = RoleDefinition(
    name="tree",
    properties=(("aria-multiselectable", False), ("aria-required", False)),
    super_roles=("select",),
)

# =============================================================================
# Document Structure Roles
# =============================================================================

ARTICLE = RoleDefinition(
    name="article",
    super_roles=("document",),
    concepts=(Concept("article"),),
)

ALERT = RoleDefinition(
    name="alert",
    super_roles=("section",),
    concepts=(Concept("alert"),),
)

APPLICATION = RoleDefinition(
    name="application",
    super_roles=("alert", "dialog"),
)

CELL = RoleDefinition(
    name="cell",
    properties=(
        ("aria-colindex", False),
        ("aria-colspan", False),
        ("aria-rowindex", False),
        ("aria-rowspan", False),
    ),
    super_roles=("section",),
    concepts=(Concept("td"),),
)

COLUMNHEADER = RoleDefinition(
    name="columnheader",
    properties=(("aria-sort", False),),
    super_roles=("cell", "gridcell", "sectionhead"),
    concepts=(Concept("th", (("scope", "col"),)),),
)

DEFINITION = RoleDefinition(
    name="definition",
    properties=(("aria-labelledby", False),),
    super_roles=("section",),
    concepts=(Concept("dd"), Concept("dfn")),
)

DOCUMENT = RoleDefinition(
    name="document",
    super_roles=("structure",),
)

FEED = RoleDefinition(
    name="feed",
    properties=(("aria-labelledby", False), ("aria-setsize", False)),
    super_roles=("section",),
)

FIGURE = RoleDefinition(
    name="figure",
    properties=(("aria-label", False), ("aria-labelledby", False)),
    super_roles=("section",),
    concepts=(Concept("figure"),),
)

GENERIC = RoleDefinition(
    name="generic",
    super_roles=("structure",),
    concepts=(Concept("div"), Concept("span")),
)

GROUP = RoleDefinition(
    name="group",
    properties=(("aria-activedescendant", False),),
    super_roles=("row", "select", "toolbar"),
    concepts=(Concept("fieldset"),),
)

HEADING = RoleDefinition(
    name="heading",
    properties=(("aria-level", True),),
    super_roles=("sectionhead",),
    concepts=tuple(Concept(f"h{level}") for level in range(1, 7)),
)

IMG = RoleDefinition(
    name="img",
    properties=(("aria-activedescendant", False),),
    super_roles=("section",),
    concepts=(Concept("img"),),
)

LIST = RoleDefinition(
    name="list",
    super_roles=("section",),
    concepts=(Concept("ol"), Concept("ul")),
)

LISTITEM = RoleDefinition(
    name="listitem",
    super_roles=("section",),
    concepts=(Concept("li"),),
)

LOG = RoleDefinition(
    name="log",
    super_roles=("section",),
)

PRESENTATION = RoleDefinition(
    name="presentation",
    super_roles=("structure",),
)

ROWGROUP = RoleDefinition(
    name="rowgroup",
    super_roles=("structure",),
    concepts=(Concept("tbody"), Concept("tfoot"), Concept("thead")),
)

ROWHEADER = RoleDefinition(
    name="rowheader",
    properties=(("aria-sort", False),),
    super_roles=("cell", "gridcell", "sectionhead"),
    concepts=(Concept("th", (("scope", "row"),)),),
)

TABLE = RoleDefinition(
    name="table",
    properties=(("aria-colcount", False), ("aria-rowcount", False)),
    super_roles=("section",),
    concepts=(Concept("table"),),
)

TERM = RoleDefinition(
    name="term",
    super_roles=("section",),
    concepts=(Concept("dt"),),
)

TOOLBAR = RoleDefinition(
    name="toolbar",
    properties=(("aria-orientation", False),),
    super_roles=("group",),
)

# =============================================================================
# Landmark Roles
# =============================================================================

BANNER = RoleDefinition(
    name="banner",
    super_roles=("landmark",),
)

COMPLEMENTARY = RoleDefinition(
    name="complementary",
    super_roles=("landmark",),
    concepts=(Concept("aside"),),
)

CONTENTINFO = RoleDefinition(
    name="contentinfo",
    super_roles=("landmark",),
    concepts=(Concept("footer"),),
)

FORM = RoleDefinition(
    name="form",
    properties=(("aria-label", False), ("aria-labelledby", False)),
    super_roles=("section",),
    concepts=(Concept("form"),),
)

MAIN = RoleDefinition(
    name="main",
    super_roles=("landmark",),
    concepts=(Concept("main"),),
)

NAVIGATION = RoleDefinition(
    name="navigation",
    super_roles=("landmark",),
    concepts=(Concept("nav"),),
)

REGION = RoleDefinition(
    name="region",
    super_roles=("landmark",),
    concepts=(Concept("section"),),
)

# =============================================================================
# Window Roles
# =============================================================================

DIALOG = RoleDefinition(
    name="dialog",
    properties=(("aria-label", False), ("aria-labelledby", False)),
    super_roles=("window",),
    concepts=(Concept("dialog"),),
)

ALERTDIALOG = RoleDefinition(
    name="alertdialog",
    super_roles=("structure",),
    concepts=(Concept("alert"),),
)

# =============================================================================
# Text-Level and Live Region Roles (ARIA 1.2)
# =============================================================================

ASSOCIATIONLIST = RoleDefinition(
    name="associationlist",
    super_roles=("section",),
    concepts=(Concept("dl"),),
)

BLOCKQUOTE = RoleDefinition(
    name="blockquote",
    super_roles=("section",),
    concepts=(Concept("blockquote"),),
)

CAPTION = RoleDefinition(
    name="caption",
    super_roles=("section",),
    concepts=(Concept("caption"), Concept("figcaption"), Concept("legend")),
)

CODE = RoleDefinition(
    name="code",
    super_roles=("section",),
    concepts=(Concept("code"),),
)

DELETION = RoleDefinition(
    name="deletion",
    super_roles=("section",),
    concepts=(Concept("del"),),
)

EMPHASIS = RoleDefinition(
    name="emphasis",
    super_roles=("section",),
    concepts=(Concept("em"),),
)

GRAPHICS_DOCUMENT = RoleDefinition(
    name="graphics-document",
    super_roles=("document",),
    concepts=(Concept("graphics-object"), Concept("img"), Concept("article")),
)

INSERTION = RoleDefinition(
    name="insertion",
    super_roles=("section",),
    concepts=(Concept("ins"),),
)

MARK = RoleDefinition(
    name="mark",
    super_roles=("section",),
    concepts=(Concept("mark"),),
)

MARQUEE = RoleDefinition(
    name="marquee",
    super_roles=("section",),
    concepts=(Concept("marquee"),),
)

MATH = RoleDefinition(
    name="math",
    super_roles=("section",),
)

METER = RoleDefinition(
    name="meter",
    super_roles=("range",),
    concepts=(Concept("meter"),),
)

PARAGRAPH = RoleDefinition(
    name="paragraph",
    super_roles=("section",),
    concepts=(Concept("p"),),
)

STATUS = RoleDefinition(
    name="status",
    super_roles=("section",),
    concepts=(Concept("output"),),
)

STRONG = RoleDefinition(
    name="strong",
    super_roles=("section",),
    concepts=(Concept("strong"),),
)

SUBSCRIPT = RoleDefinition(
    name="subscript",
    super_roles=("section",),
    concepts=(Concept("sub"), Concept("sup")),
)

SUPERSCRIPT = RoleDefinition(
    name="superscript",
    super_roles=("section",),
    concepts=(Concept("sub"), Concept("sup")),
)

TIME = RoleDefinition(
    name="time",
    super_roles=("section",),
    concepts=(Concept("time"),),
)

# =============================================================================
# Indexes
# =============================================================================

# Roles accepted by explicit lookup
EXPLICIT_ROLES: tuple[RoleDefinition, ...] = (
    BUTTON,
    CHECKBOX,
    RADIO,
    SWITCH,
    OPTION,
    COMBOBOX,
    HEADING,
    SPINBUTTON,
    SLIDER,
    SEPARATOR,
    SCROLLBAR,
    ARTICLE,
    DIALOG,
    ALERT,
    ALERTDIALOG,
    APPLICATION,
    BANNER,
    CELL,
    COLUMNHEADER,
    DEFINITION,
    FEED,
    FIGURE,
    FORM,
    GRID,
    GRIDCELL,
    GROUP,
    IMG,
    LINK,
    LIST,
    LISTBOX,
    LISTITEM,
    LOG,
    MAIN,
    MENUBAR,
    MENU,
    MENUITEM,
    MENUITEMCHECKBOX,
    MENUITEMRADIO,
    NAVIGATION,
    PROGRESSBAR,
    RADIOGROUP,
    ROW,
    ROWGROUP,
    ROWHEADER,
    SEARCHBOX,
    TAB,
    TABLE,
    TABLELIST,
    TERM,
    TEXTBOX,
    TOOLBAR,
    TREE,
    REGION,
    PRESENTATION,
    DOCUMENT,
    GENERIC,
)

# Definitions reachable only through implicit inference or concept matching
IMPLICIT_ONLY_ROLES: tuple[RoleDefinition, ...] = (
    ASSOCIATIONLIST,
    BLOCKQUOTE,
    CAPTION,
    CODE,
    COMPLEMENTARY,
    CONTENTINFO,
    DELETION,
    EMPHASIS,
    GRAPHICS_DOCUMENT,
    INSERTION,
    MARK,
    MARQUEE,
    MATH,
    METER,
    PARAGRAPH,
    STATUS,
    STRONG,
    SUBSCRIPT,
    SUPERSCRIPT,
    TIME,
)

ALL_ROLES: tuple[RoleDefinition, ...] = EXPLICIT_ROLES + IMPLICIT_ONLY_ROLES
