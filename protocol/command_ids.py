"""Canonical command ids and argument names shared by catalog, parser, and tests."""

CMD_NONE = 0

# File
CMD_OPEN_FILE = 200
CMD_CLOSE = 201
CMD_SAVE_AS = 202
CMD_PRINT = 203
CMD_RELOAD = 204
CMD_NEW_WINDOW = 205
CMD_SHOW_IN_FOLDER = 206
CMD_RENAME_FILE = 207
CMD_DELETE_FILE = 208
CMD_COPY_FILE_PATH = 209
CMD_PROPERTIES = 210
CMD_EXIT = 211

# View
CMD_TOGGLE_FULLSCREEN = 220
CMD_TOGGLE_PRESENTATION_MODE = 221
CMD_TOGGLE_BOOKMARKS = 222
CMD_TOGGLE_TOOLBAR = 223
CMD_TOGGLE_MENU_BAR = 224
CMD_SINGLE_PAGE_VIEW = 225
CMD_FACING_VIEW = 226
CMD_BOOK_VIEW = 227
CMD_TOGGLE_CONTINUOUS_VIEW = 228
CMD_ROTATE_LEFT = 229
CMD_ROTATE_RIGHT = 230

# Navigation
CMD_SCROLL_UP = 240
CMD_SCROLL_DOWN = 241
CMD_SCROLL_LEFT = 242
CMD_SCROLL_RIGHT = 243
CMD_SCROLL_UP_PAGE = 244
CMD_SCROLL_DOWN_PAGE = 245
CMD_GO_TO_NEXT_PAGE = 246
CMD_GO_TO_PREV_PAGE = 247
CMD_GO_TO_FIRST_PAGE = 248
CMD_GO_TO_LAST_PAGE = 249
CMD_GO_TO_PAGE = 250
CMD_NAVIGATE_BACK = 251
CMD_NAVIGATE_FORWARD = 252

# Search and selection
CMD_FIND_FIRST = 260
CMD_FIND_NEXT = 261
CMD_FIND_PREV = 262
CMD_FIND_MATCH_CASE = 263
CMD_COPY_SELECTION = 264
CMD_SELECT_ALL = 265

# Zoom
CMD_ZOOM_IN = 270
CMD_ZOOM_OUT = 271
CMD_ZOOM_FIT_PAGE = 272
CMD_ZOOM_FIT_WIDTH = 273
CMD_ZOOM_ACTUAL_SIZE = 274

# Annotations
CMD_CREATE_ANNOT_TEXT = 280
CMD_CREATE_ANNOT_LINK = 281
CMD_CREATE_ANNOT_FREE_TEXT = 282
CMD_CREATE_ANNOT_LINE = 283
CMD_CREATE_ANNOT_SQUARE = 284
CMD_CREATE_ANNOT_CIRCLE = 285
CMD_CREATE_ANNOT_POLYGON = 286
CMD_CREATE_ANNOT_POLY_LINE = 287
CMD_CREATE_ANNOT_HIGHLIGHT = 288
CMD_CREATE_ANNOT_UNDERLINE = 289
CMD_CREATE_ANNOT_SQUIGGLY = 290
CMD_CREATE_ANNOT_STRIKE_OUT = 291
CMD_CREATE_ANNOT_REDACT = 292
CMD_CREATE_ANNOT_STAMP = 293
CMD_CREATE_ANNOT_CARET = 294
CMD_CREATE_ANNOT_INK = 295
CMD_CREATE_ANNOT_POPUP = 296
CMD_CREATE_ANNOT_FILE_ATTACHMENT = 297

# Application
CMD_OPTIONS = 300
CMD_COMMAND_PALETTE = 301
CMD_EXEC = 302

# Argument names
ARG_SPEC = "spec"
ARG_FILTER = "filter"
ARG_COLOR = "color"
ARG_OPEN_EDIT = "openedit"
ARG_N = "n"
