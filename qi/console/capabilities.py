"""QI Console capabilities module

The catalog of standard terminfo capabilities, keyed by capability name,
and the ordinal tables compiled terminfo files are laid out by.
"""

# pylint: disable=line-too-long

from collections import namedtuple
from types import MappingProxyType

# Human-readable metadata for one standard capability
CapabilityDef = namedtuple(
    "CapabilityDef", ["code", "variable_name", "tcap_code", "description"]
)


def get_definition(code):
    """Get the catalog entry for a capability name, or None"""
    return CAPABILITIES.get(code)


def is_standard(code):
    return code in CAPABILITIES


# Order of the boolean, numeric and string sections of a compiled terminfo
# file (see term(5)). The OT* names are obsolete termcap capabilities that
# have no catalog entry.
BOOLEAN_NAMES = (
    "bw", "am", "xsb", "xhp", "xenl", "eo", "gn", "hc", "km", "hs", "in", "da",
    "db", "mir", "msgr", "os", "eslok", "xt", "hz", "ul", "xon", "nxon",
    "mc5i", "chts", "nrrmc", "npc", "ndscr", "ccc", "bce", "hls", "xhpa",
    "crxm", "daisy", "xvpa", "sam", "cpix", "lpix", "OTbs", "OTns", "OTnc",
    "OTMT", "OTNL", "OTpt", "OTxr",
)

NUMBER_NAMES = (
    "cols", "it", "lines", "lm", "xmc", "pb", "vt", "wsl", "nlab", "lh", "lw",
    "ma", "wnum", "colors", "pairs", "ncv", "bufsz", "spinv", "spinh", "maddr",
    "mjump", "mcs", "mls", "npins", "orc", "orhi", "orl", "orvi", "cps",
    "widcs", "btns", "bitwin", "bitype", "OTug", "OTdC", "OTdN", "OTdB",
    "OTdT", "OTkn",
)

STRING_NAMES = (
    "cbt", "bel", "cr", "csr", "tbc", "clear", "el", "ed", "hpa", "cmdch",
    "cup", "cud1", "home", "civis", "cub1", "mrcup", "cnorm", "cuf1", "ll",
    "cuu1", "cvvis", "dch1", "dl1", "dsl", "hd", "smacs", "blink", "bold",
    "smcup", "smdc", "dim", "smir", "invis", "prot", "rev", "smso", "smul",
    "ech", "rmacs", "sgr0", "rmcup", "rmdc", "rmir", "rmso", "rmul", "flash",
    "ff", "fsl", "is1", "is2", "is3", "if", "ich1", "il1", "ip", "kbs", "ktbc",
    "kclr", "kctab", "kdch1", "kdl1", "kcud1", "krmir", "kel", "ked", "kf0",
    "kf1", "kf10", "kf2", "kf3", "kf4", "kf5", "kf6", "kf7", "kf8", "kf9",
    "khome", "kich1", "kil1", "kcub1", "kll", "knp", "kpp", "kcuf1", "kind",
    "kri", "khts", "kcuu1", "rmkx", "smkx", "lf0", "lf1", "lf10", "lf2", "lf3",
    "lf4", "lf5", "lf6", "lf7", "lf8", "lf9", "rmm", "smm", "nel", "pad",
    "dch", "dl", "cud", "ich", "indn", "il", "cub", "cuf", "rin", "cuu",
    "pfkey", "pfloc", "pfx", "mc0", "mc4", "mc5", "rep", "rs1", "rs2", "rs3",
    "rf", "rc", "vpa", "sc", "ind", "ri", "sgr", "hts", "wind", "ht", "tsl",
    "uc", "hu", "iprog", "ka1", "ka3", "kb2", "kc1", "kc3", "mc5p", "rmp",
    "acsc", "pln", "kcbt", "smxon", "rmxon", "smam", "rmam", "xonc", "xoffc",
    "enacs", "smln", "rmln", "kbeg", "kcan", "kclo", "kcmd", "kcpy", "kcrt",
    "kend", "kent", "kext", "kfnd", "khlp", "kmrk", "kmsg", "kmov", "knxt",
    "kopn", "kopt", "kprv", "kprt", "krdo", "kref", "krfr", "krpl", "krst",
    "kres", "ksav", "kspd", "kund", "kBEG", "kCAN", "kCMD", "kCPY", "kCRT",
    "kDC", "kDL", "kslt", "kEND", "kEOL", "kEXT", "kFND", "kHLP", "kHOM",
    "kIC", "kLFT", "kMSG", "kMOV", "kNXT", "kOPT", "kPRV", "kPRT", "kRDO",
    "kRPL", "kRIT", "kRES", "kSAV", "kSPD", "kUND", "rfi", "kf11", "kf12",
    "kf13", "kf14", "kf15", "kf16", "kf17", "kf18", "kf19", "kf20", "kf21",
    "kf22", "kf23", "kf24", "kf25", "kf26", "kf27", "kf28", "kf29", "kf30",
    "kf31", "kf32", "kf33", "kf34", "kf35", "kf36", "kf37", "kf38", "kf39",
    "kf40", "kf41", "kf42", "kf43", "kf44", "kf45", "kf46", "kf47", "kf48",
    "kf49", "kf50", "kf51", "kf52", "kf53", "kf54", "kf55", "kf56", "kf57",
    "kf58", "kf59", "kf60", "kf61", "kf62", "kf63", "el1", "mgc", "smgl",
    "smgr", "fln", "sclk", "dclk", "rmclk", "cwin", "wingo", "hup", "dial",
    "qdial", "tone", "pulse", "hook", "pause", "wait", "u0", "u1", "u2", "u3",
    "u4", "u5", "u6", "u7", "u8", "u9", "op", "oc", "initc", "initp", "scp",
    "setf", "setb", "cpi", "lpi", "chr", "cvr", "defc", "swidm", "sdrfq",
    "sitm", "slm", "smicm", "snlq", "snrmq", "sshm", "ssubm", "ssupm", "sum",
    "rwidm", "ritm", "rlm", "rmicm", "rshm", "rsubm", "rsupm", "rum", "mhpa",
    "mcud1", "mcub1", "mcuf1", "mvpa", "mcuu1", "porder", "mcud", "mcub",
    "mcuf", "mcuu", "scs", "smgb", "smgbp", "smglp", "smgrp", "smgt", "smgtp",
    "sbim", "scsd", "rbim", "rcsd", "subcs", "supcs", "docr", "zerom", "csnm",
    "kmous", "minfo", "reqmp", "getm", "setaf", "setab", "pfxl", "devt",
    "csin", "s0ds", "s1ds", "s2ds", "s3ds", "smglr", "smgtb", "birep", "binel",
    "bicr", "colornm", "defbi", "endbi", "setcolor", "slines", "dispc",
    "smpch", "rmpch", "smsc", "rmsc", "pctrm", "scesc", "scesa", "ehhlm",
    "elhlm", "elohlm", "erhlm", "ethlm", "evhlm", "sgr1", "slength", "OTi2",
    "OTrs", "OTnl", "OTbc", "OTko", "OTma", "OTG2", "OTG3", "OTG1", "OTG4",
    "OTGR", "OTGL", "OTGU", "OTGD", "OTGH", "OTGV", "OTGC", "meml", "memu",
    "box1",
)

CAPABILITIES = MappingProxyType({
    "bw": CapabilityDef(
        "bw", "auto_left_margin", "bw", "cub1 wraps from column 0 to last column"
    ),
    "am": CapabilityDef(
        "am", "auto_right_margin", "am", "terminal has automatic margins"
    ),
    "bce": CapabilityDef(
        "bce", "back_color_erase", "ut", "screen erased with background color"
    ),
    "ccc": CapabilityDef(
        "ccc", "can_change", "cc", "terminal can re-define existing colors"
    ),
    "xhp": CapabilityDef(
        "xhp", "ceol_standout_glitch", "xs", "standout not erased by overwriting (hp)"
    ),
    "xhpa": CapabilityDef(
        "xhpa", "col_addr_glitch", "YA", "only positive motion for hpa/mhpa caps"
    ),
    "cpix": CapabilityDef(
        "cpix", "cpi_changes_res", "YF", "changing character pitch changes resolution"
    ),
    "crxm": CapabilityDef(
        "crxm", "cr_cancels_micro_mode", "YB", "using cr turns off micro mode"
    ),
    "xt": CapabilityDef(
        "xt", "dest_tabs_magic_smso", "xt", "tabs destructive, magic so char (t1061)"
    ),
    "xenl": CapabilityDef(
        "xenl", "eat_newline_glitch", "xn", "newline ignored after 80 cols (concept)"
    ),
    "eo": CapabilityDef(
        "eo", "erase_overstrike", "eo", "can erase overstrikes with a blank"
    ),
    "gn": CapabilityDef(
        "gn", "generic_type", "gn", "generic line type"
    ),
    "hc": CapabilityDef(
        "hc", "hard_copy", "hc", "hardcopy terminal"
    ),
    "chts": CapabilityDef(
        "chts", "hard_cursor", "HC", "cursor is hard to see"
    ),
    "km": CapabilityDef(
        "km", "has_meta_key", "km", "Has a meta key (i.e., sets 8th-bit)"
    ),
    "daisy": CapabilityDef(
        "daisy", "has_print_wheel", "YC", "printer needs operator to change character set"
    ),
    "hs": CapabilityDef(
        "hs", "has_status_line", "hs", "has extra status line"
    ),
    "hls": CapabilityDef(
        "hls", "hue_lightness_saturation", "hl", "terminal uses only HLS color notation (Tektronix)"
    ),
    "in": CapabilityDef(
        "in", "insert_null_glitch", "in", "insert mode distinguishes nulls"
    ),
    "lpix": CapabilityDef(
        "lpix", "lpi_changes_res", "YG", "changing line pitch changes resolution"
    ),
    "da": CapabilityDef(
        "da", "memory_above", "da", "display may be retained above the screen"
    ),
    "db": CapabilityDef(
        "db", "memory_below", "db", "display may be retained below the screen"
    ),
    "mir": CapabilityDef(
        "mir", "move_insert_mode", "mi", "safe to move while in insert mode"
    ),
    "msgr": CapabilityDef(
        "msgr", "move_standout_mode", "ms", "safe to move while in standout mode"
    ),
    "nxon": CapabilityDef(
        "nxon", "needs_xon_xoff", "nx", "padding will not work, xon/xoff required"
    ),
    "xsb": CapabilityDef(
        "xsb", "no_esc_ctlc", "xb", "beehive (f1=escape, f2=ctrl C)"
    ),
    "npc": CapabilityDef(
        "npc", "no_pad_char", "NP", "pad character does not exist"
    ),
    "ndscr": CapabilityDef(
        "ndscr", "non_dest_scroll_region", "ND", "scrolling region is non-destructive"
    ),
    "nrrmc": CapabilityDef(
        "nrrmc", "non_rev_rmcup", "NR", "smcup does not reverse rmcup"
    ),
    "os": CapabilityDef(
        "os", "over_strike", "os", "terminal can overstrike"
    ),
    "mc5i": CapabilityDef(
        "mc5i", "prtr_silent", "5i", "printer will not echo on screen"
    ),
    "xvpa": CapabilityDef(
        "xvpa", "row_addr_glitch", "YD", "only positive motion for vpa/mvpa caps"
    ),
    "sam": CapabilityDef(
        "sam", "semi_auto_right_margin", "YE", "printing in last column causes cr"
    ),
    "eslok": CapabilityDef(
        "eslok", "status_line_esc_ok", "es", "escape can be used on the status line"
    ),
    "hz": CapabilityDef(
        "hz", "tilde_glitch", "hz", "cannot print ~'s (hazeltine)"
    ),
    "ul": CapabilityDef(
        "ul", "transparent_underline", "ul", "underline character overstrikes"
    ),
    "xon": CapabilityDef(
        "xon", "xon_xoff", "xo", "terminal uses xon/xoff handshaking"
    ),
    "cols": CapabilityDef(
        "cols", "columns", "co", "number of columns in a line"
    ),
    "it": CapabilityDef(
        "it", "init_tabs", "it", "tabs initially every # spaces"
    ),
    "lh": CapabilityDef(
        "lh", "label_height", "lh", "rows in each label"
    ),
    "lw": CapabilityDef(
        "lw", "label_width", "lw", "columns in each label"
    ),
    "lines": CapabilityDef(
        "lines", "lines", "li", "number of lines on screen or page"
    ),
    "lm": CapabilityDef(
        "lm", "lines_of_memory", "lm", "lines of memory if > line. 0 means varies"
    ),
    "xmc": CapabilityDef(
        "xmc", "magic_cookie_glitch", "sg", "number of blank characters left by smso or rmso"
    ),
    "ma": CapabilityDef(
        "ma", "max_attributes", "ma", "maximum combined attributes terminal can handle"
    ),
    "colors": CapabilityDef(
        "colors", "max_colors", "Co", "maximum number of colors on screen"
    ),
    "pairs": CapabilityDef(
        "pairs", "max_pairs", "pa", "maximum number of color-pairs on the screen"
    ),
    "wnum": CapabilityDef(
        "wnum", "maximum_windows", "MW", "maximum number of defineable windows"
    ),
    "ncv": CapabilityDef(
        "ncv", "no_color_video", "NC", "video attributes that cannot be used with colors"
    ),
    "nlab": CapabilityDef(
        "nlab", "num_labels", "Nl", "number of labels on screen"
    ),
    "pb": CapabilityDef(
        "pb", "padding_baud_rate", "pb", "lowest baud rate where padding needed"
    ),
    "vt": CapabilityDef(
        "vt", "virtual_terminal", "vt", "virtual terminal number (CB/unix)"
    ),
    "wsl": CapabilityDef(
        "wsl", "width_status_line", "ws", "number of columns in status line"
    ),
    "bitwin": CapabilityDef(
        "bitwin", "bit_image_entwining", "Yo", "number of passes for each bit-image row"
    ),
    "bitype": CapabilityDef(
        "bitype", "bit_image_type", "Yp", "type of bit-image device"
    ),
    "bufsz": CapabilityDef(
        "bufsz", "buffer_capacity", "Ya", "numbers of bytes buffered before printing"
    ),
    "btns": CapabilityDef(
        "btns", "buttons", "BT", "number of buttons on mouse"
    ),
    "spinh": CapabilityDef(
        "spinh", "dot_horz_spacing", "Yc", "spacing of dots horizontally in dots per inch"
    ),
    "spinv": CapabilityDef(
        "spinv", "dot_vert_spacing", "Yb", "spacing of pins vertically in pins per inch"
    ),
    "maddr": CapabilityDef(
        "maddr", "max_micro_address", "Yd", "maximum value in micro_..._address"
    ),
    "mjump": CapabilityDef(
        "mjump", "max_micro_jump", "Ye", "maximum value in parm_..._micro"
    ),
    "mcs": CapabilityDef(
        "mcs", "micro_col_size", "Yf", "character step size when in micro mode"
    ),
    "mls": CapabilityDef(
        "mls", "micro_line_size", "Yg", "line step size when in micro mode"
    ),
    "npins": CapabilityDef(
        "npins", "number_of_pins", "Yh", "numbers of pins in print-head"
    ),
    "orc": CapabilityDef(
        "orc", "output_res_char", "Yi", "horizontal resolution in units per line"
    ),
    "orhi": CapabilityDef(
        "orhi", "output_res_horz_inch", "Yk", "horizontal resolution in units per inch"
    ),
    "orl": CapabilityDef(
        "orl", "output_res_line", "Yj", "vertical resolution in units per line"
    ),
    "orvi": CapabilityDef(
        "orvi", "output_res_vert_inch", "Yl", "vertical resolution in units per inch"
    ),
    "cps": CapabilityDef(
        "cps", "print_rate", "Ym", "print rate in characters per second"
    ),
    "widcs": CapabilityDef(
        "widcs", "wide_char_size", "Yn", "character step size when in double wide mode"
    ),
    "acsc": CapabilityDef(
        "acsc", "acs_chars", "ac", "graphics charset pairs, based on vt100"
    ),
    "cbt": CapabilityDef(
        "cbt", "back_tab", "bt", "back tab (P)"
    ),
    "bel": CapabilityDef(
        "bel", "bell", "bl", "audible signal (bell) (P)"
    ),
    "cr": CapabilityDef(
        "cr", "carriage_return", "cr", "carriage return (P*) (P*)"
    ),
    "cpi": CapabilityDef(
        "cpi", "change_char_pitch", "ZA", "Change number of characters per inch to #1"
    ),
    "lpi": CapabilityDef(
        "lpi", "change_line_pitch", "ZB", "Change number of lines per inch to #1"
    ),
    "chr": CapabilityDef(
        "chr", "change_res_horz", "ZC", "Change horizontal resolution to #1"
    ),
    "cvr": CapabilityDef(
        "cvr", "change_res_vert", "ZD", "Change vertical resolution to #1"
    ),
    "csr": CapabilityDef(
        "csr", "change_scroll_region", "cs", "change region to line #1 to line #2 (P)"
    ),
    "rmp": CapabilityDef(
        "rmp", "char_padding", "rP", "like ip but when in insert mode"
    ),
    "tbc": CapabilityDef(
        "tbc", "clear_all_tabs", "ct", "clear all tab stops (P)"
    ),
    "mgc": CapabilityDef(
        "mgc", "clear_margins", "MC", "clear right and left soft margins"
    ),
    "clear": CapabilityDef(
        "clear", "clear_screen", "cl", "clear screen and home cursor (P*)"
    ),
    "el1": CapabilityDef(
        "el1", "clr_bol", "cb", "Clear to beginning of line"
    ),
    "el": CapabilityDef(
        "el", "clr_eol", "ce", "clear to end of line (P)"
    ),
    "ed": CapabilityDef(
        "ed", "clr_eos", "cd", "clear to end of screen (P*)"
    ),
    "hpa": CapabilityDef(
        "hpa", "column_address", "ch", "horizontal position #1, absolute (P)"
    ),
    "cmdch": CapabilityDef(
        "cmdch", "command_character", "CC", "terminal settable cmd character in prototype !?"
    ),
    "cwin": CapabilityDef(
        "cwin", "create_window", "CW", "define a window #1 from #2,#3 to #4,#5"
    ),
    "cup": CapabilityDef(
        "cup", "cursor_address", "cm", "move to row #1 columns #2"
    ),
    "cud1": CapabilityDef(
        "cud1", "cursor_down", "do", "down one line"
    ),
    "home": CapabilityDef(
        "home", "cursor_home", "ho", "home cursor (if no cup)"
    ),
    "civis": CapabilityDef(
        "civis", "cursor_invisible", "vi", "make cursor invisible"
    ),
    "cub1": CapabilityDef(
        "cub1", "cursor_left", "le", "move left one space"
    ),
    "mrcup": CapabilityDef(
        "mrcup", "cursor_mem_address", "CM", "memory relative cursor addressing, move to row #1 columns #2"
    ),
    "cnorm": CapabilityDef(
        "cnorm", "cursor_normal", "ve", "make cursor appear normal (undo civis/cvvis)"
    ),
    "cuf1": CapabilityDef(
        "cuf1", "cursor_right", "nd", "non-destructive space (move right one space)"
    ),
    "ll": CapabilityDef(
        "ll", "cursor_to_ll", "ll", "last line, first column (if no cup)"
    ),
    "cuu1": CapabilityDef(
        "cuu1", "cursor_up", "up", "up one line"
    ),
    "cvvis": CapabilityDef(
        "cvvis", "cursor_visible", "vs", "make cursor very visible"
    ),
    "defc": CapabilityDef(
        "defc", "define_char", "ZE", "Define a character #1, #2 dots wide, descender #3"
    ),
    "dch1": CapabilityDef(
        "dch1", "delete_character", "dc", "delete character (P*)"
    ),
    "dl1": CapabilityDef(
        "dl1", "delete_line", "dl", "delete line (P*)"
    ),
    "dial": CapabilityDef(
        "dial", "dial_phone", "DI", "dial number #1"
    ),
    "dsl": CapabilityDef(
        "dsl", "dis_status_line", "ds", "disable status line"
    ),
    "dclk": CapabilityDef(
        "dclk", "display_clock", "DK", "display clock"
    ),
    "hd": CapabilityDef(
        "hd", "down_half_line", "hd", "half a line down"
    ),
    "enacs": CapabilityDef(
        "enacs", "ena_acs", "eA", "enable alternate char set"
    ),
    "smacs": CapabilityDef(
        "smacs", "enter_alt_charset_mode", "as", "start alternate character set (P)"
    ),
    "smam": CapabilityDef(
        "smam", "enter_am_mode", "SA", "turn on automatic margins"
    ),
    "blink": CapabilityDef(
        "blink", "enter_blink_mode", "mb", "turn on blinking"
    ),
    "bold": CapabilityDef(
        "bold", "enter_bold_mode", "md", "turn on bold (extra bright) mode"
    ),
    "smcup": CapabilityDef(
        "smcup", "enter_ca_mode", "ti", "string to start programs using cup"
    ),
    "smdc": CapabilityDef(
        "smdc", "enter_delete_mode", "dm", "enter delete mode"
    ),
    "dim": CapabilityDef(
        "dim", "enter_dim_mode", "mh", "turn on half-bright mode"
    ),
    "swidm": CapabilityDef(
        "swidm", "enter_doublewide_mode", "ZF", "Enter double-wide mode"
    ),
    "sdrfq": CapabilityDef(
        "sdrfq", "enter_draft_quality", "ZG", "Enter draft-quality mode"
    ),
    "smir": CapabilityDef(
        "smir", "enter_insert_mode", "im", "enter insert mode"
    ),
    "sitm": CapabilityDef(
        "sitm", "enter_italics_mode", "ZH", "Enter italic mode"
    ),
    "slm": CapabilityDef(
        "slm", "enter_leftward_mode", "ZI", "Start leftward carriage motion"
    ),
    "smicm": CapabilityDef(
        "smicm", "enter_micro_mode", "ZJ", "Start micro-motion mode"
    ),
    "snlq": CapabilityDef(
        "snlq", "enter_near_letter_quality", "ZK", "Enter NLQ mode"
    ),
    "snrmq": CapabilityDef(
        "snrmq", "enter_normal_quality", "ZL", "Enter normal-quality mode"
    ),
    "prot": CapabilityDef(
        "prot", "enter_protected_mode", "mp", "turn on protected mode"
    ),
    "rev": CapabilityDef(
        "rev", "enter_reverse_mode", "mr", "turn on reverse video mode"
    ),
    "invis": CapabilityDef(
        "invis", "enter_secure_mode", "mk", "turn on blank mode (characters invisible)"
    ),
    "sshm": CapabilityDef(
        "sshm", "enter_shadow_mode", "ZM", "Enter shadow-print mode"
    ),
    "smso": CapabilityDef(
        "smso", "enter_standout_mode", "so", "begin standout mode"
    ),
    "ssubm": CapabilityDef(
        "ssubm", "enter_subscript_mode", "ZN", "Enter subscript mode"
    ),
    "ssupm": CapabilityDef(
        "ssupm", "enter_superscript_mode", "ZO", "Enter superscript mode"
    ),
    "smul": CapabilityDef(
        "smul", "enter_underline_mode", "us", "begin underline mode"
    ),
    "sum": CapabilityDef(
        "sum", "enter_upward_mode", "ZP", "Start upward carriage motion"
    ),
    "smxon": CapabilityDef(
        "smxon", "enter_xon_mode", "SX", "turn on xon/xoff handshaking"
    ),
    "ech": CapabilityDef(
        "ech", "erase_chars", "ec", "erase #1 characters (P)"
    ),
    "rmacs": CapabilityDef(
        "rmacs", "exit_alt_charset_mode", "ae", "end alternate character set (P)"
    ),
    "rmam": CapabilityDef(
        "rmam", "exit_am_mode", "RA", "turn off automatic margins"
    ),
    "sgr0": CapabilityDef(
        "sgr0", "exit_attribute_mode", "me", "turn off all attributes"
    ),
    "rmcup": CapabilityDef(
        "rmcup", "exit_ca_mode", "te", "strings to end programs using cup"
    ),
    "rmdc": CapabilityDef(
        "rmdc", "exit_delete_mode", "ed", "end delete mode"
    ),
    "rwidm": CapabilityDef(
        "rwidm", "exit_doublewide_mode", "ZQ", "End double-wide mode"
    ),
    "rmir": CapabilityDef(
        "rmir", "exit_insert_mode", "ei", "exit insert mode"
    ),
    "ritm": CapabilityDef(
        "ritm", "exit_italics_mode", "ZR", "End italic mode"
    ),
    "rlm": CapabilityDef(
        "rlm", "exit_leftward_mode", "ZS", "End left-motion mode"
    ),
    "rmicm": CapabilityDef(
        "rmicm", "exit_micro_mode", "ZT", "End micro-motion mode"
    ),
    "rshm": CapabilityDef(
        "rshm", "exit_shadow_mode", "ZU", "End shadow-print mode"
    ),
    "rmso": CapabilityDef(
        "rmso", "exit_standout_mode", "se", "exit standout mode"
    ),
    "rsubm": CapabilityDef(
        "rsubm", "exit_subscript_mode", "ZV", "End subscript mode"
    ),
    "rsupm": CapabilityDef(
        "rsupm", "exit_superscript_mode", "ZW", "End superscript mode"
    ),
    "rmul": CapabilityDef(
        "rmul", "exit_underline_mode", "ue", "exit underline mode"
    ),
    "rum": CapabilityDef(
        "rum", "exit_upward_mode", "ZX", "End reverse character motion"
    ),
    "rmxon": CapabilityDef(
        "rmxon", "exit_xon_mode", "RX", "turn off xon/xoff handshaking"
    ),
    "pause": CapabilityDef(
        "pause", "fixed_pause", "PA", "pause for 2-3 seconds"
    ),
    "hook": CapabilityDef(
        "hook", "flash_hook", "fh", "flash switch hook"
    ),
    "flash": CapabilityDef(
        "flash", "flash_screen", "vb", "visible bell (may not move cursor)"
    ),
    "ff": CapabilityDef(
        "ff", "form_feed", "ff", "hardcopy terminal page eject (P*)"
    ),
    "fsl": CapabilityDef(
        "fsl", "from_status_line", "fs", "return from status line"
    ),
    "wingo": CapabilityDef(
        "wingo", "goto_window", "WG", "go to window #1"
    ),
    "hup": CapabilityDef(
        "hup", "hangup", "HU", "hang-up phone"
    ),
    "is1": CapabilityDef(
        "is1", "init_1string", "i1", "initialization string"
    ),
    "is2": CapabilityDef(
        "is2", "init_2string", "is", "initialization string"
    ),
    "is3": CapabilityDef(
        "is3", "init_3string", "i3", "initialization string"
    ),
    "if": CapabilityDef(
        "if", "init_file", "if", "name of initialization file"
    ),
    "iprog": CapabilityDef(
        "iprog", "init_prog", "iP", "path name of program for initialization"
    ),
    "initc": CapabilityDef(
        "initc", "initialize_color", "Ic", "initialize color #1 to (#2,#3,#4)"
    ),
    "initp": CapabilityDef(
        "initp", "initialize_pair", "Ip", "Initialize color pair #1 to fg=(#2,#3,#4), bg=(#5,#6,#7)"
    ),
    "ich1": CapabilityDef(
        "ich1", "insert_character", "ic", "insert character (P)"
    ),
    "il1": CapabilityDef(
        "il1", "insert_line", "al", "insert line (P*)"
    ),
    "ip": CapabilityDef(
        "ip", "insert_padding", "ip", "insert padding after inserted character"
    ),
    "ka1": CapabilityDef(
        "ka1", "key_a1", "K1", "upper left of keypad"
    ),
    "ka3": CapabilityDef(
        "ka3", "key_a3", "K3", "upper right of keypad"
    ),
    "kb2": CapabilityDef(
        "kb2", "key_b2", "K2", "center of keypad"
    ),
    "kbs": CapabilityDef(
        "kbs", "key_backspace", "kb", "backspace key"
    ),
    "kbeg": CapabilityDef(
        "kbeg", "key_beg", "@1", "begin key"
    ),
    "kcbt": CapabilityDef(
        "kcbt", "key_btab", "kB", "back-tab key"
    ),
    "kc1": CapabilityDef(
        "kc1", "key_c1", "K4", "lower left of keypad"
    ),
    "kc3": CapabilityDef(
        "kc3", "key_c3", "K5", "lower right of keypad"
    ),
    "kcan": CapabilityDef(
        "kcan", "key_cancel", "@2", "cancel key"
    ),
    "ktbc": CapabilityDef(
        "ktbc", "key_catab", "ka", "clear-all-tabs key"
    ),
    "kclr": CapabilityDef(
        "kclr", "key_clear", "kC", "clear-screen or erase key"
    ),
    "kclo": CapabilityDef(
        "kclo", "key_close", "@3", "close key"
    ),
    "kcmd": CapabilityDef(
        "kcmd", "key_command", "@4", "command key"
    ),
    "kcpy": CapabilityDef(
        "kcpy", "key_copy", "@5", "copy key"
    ),
    "kcrt": CapabilityDef(
        "kcrt", "key_create", "@6", "create key"
    ),
    "kctab": CapabilityDef(
        "kctab", "key_ctab", "kt", "clear-tab key"
    ),
    "kdch1": CapabilityDef(
        "kdch1", "key_dc", "kD", "delete-character key"
    ),
    "kdl1": CapabilityDef(
        "kdl1", "key_dl", "kL", "delete-line key"
    ),
    "kcud1": CapabilityDef(
        "kcud1", "key_down", "kd", "down-arrow key"
    ),
    "krmir": CapabilityDef(
        "krmir", "key_eic", "kM", "sent by rmir or smir in insert mode"
    ),
    "kend": CapabilityDef(
        "kend", "key_end", "@7", "end key"
    ),
    "kent": CapabilityDef(
        "kent", "key_enter", "@8", "enter/send key"
    ),
    "kel": CapabilityDef(
        "kel", "key_eol", "kE", "clear-to-end-of-line key"
    ),
    "ked": CapabilityDef(
        "ked", "key_eos", "kS", "clear-to-end-of-screen key"
    ),
    "kext": CapabilityDef(
        "kext", "key_exit", "@9", "exit key"
    ),
    "kf0": CapabilityDef(
        "kf0", "key_f0", "k0", "F0 function key"
    ),
    "kf1": CapabilityDef(
        "kf1", "key_f1", "k1", "F1 function key"
    ),
    "kf10": CapabilityDef(
        "kf10", "key_f10", "k;", "F10 function key"
    ),
    "kf11": CapabilityDef(
        "kf11", "key_f11", "F1", "F11 function key"
    ),
    "kf12": CapabilityDef(
        "kf12", "key_f12", "F2", "F12 function key"
    ),
    "kf13": CapabilityDef(
        "kf13", "key_f13", "F3", "F13 function key"
    ),
    "kf14": CapabilityDef(
        "kf14", "key_f14", "F4", "F14 function key"
    ),
    "kf15": CapabilityDef(
        "kf15", "key_f15", "F5", "F15 function key"
    ),
    "kf16": CapabilityDef(
        "kf16", "key_f16", "F6", "F16 function key"
    ),
    "kf17": CapabilityDef(
        "kf17", "key_f17", "F7", "F17 function key"
    ),
    "kf18": CapabilityDef(
        "kf18", "key_f18", "F8", "F18 function key"
    ),
    "kf19": CapabilityDef(
        "kf19", "key_f19", "F9", "F19 function key"
    ),
    "kf2": CapabilityDef(
        "kf2", "key_f2", "k2", "F2 function key"
    ),
    "kf20": CapabilityDef(
        "kf20", "key_f20", "FA", "F20 function key"
    ),
    "kf21": CapabilityDef(
        "kf21", "key_f21", "FB", "F21 function key"
    ),
    "kf22": CapabilityDef(
        "kf22", "key_f22", "FC", "F22 function key"
    ),
    "kf23": CapabilityDef(
        "kf23", "key_f23", "FD", "F23 function key"
    ),
    "kf24": CapabilityDef(
        "kf24", "key_f24", "FE", "F24 function key"
    ),
    "kf25": CapabilityDef(
        "kf25", "key_f25", "FF", "F25 function key"
    ),
    "kf26": CapabilityDef(
        "kf26", "key_f26", "FG", "F26 function key"
    ),
    "kf27": CapabilityDef(
        "kf27", "key_f27", "FH", "F27 function key"
    ),
    "kf28": CapabilityDef(
        "kf28", "key_f28", "FI", "F28 function key"
    ),
    "kf29": CapabilityDef(
        "kf29", "key_f29", "FJ", "F29 function key"
    ),
    "kf3": CapabilityDef(
        "kf3", "key_f3", "k3", "F3 function key"
    ),
    "kf30": CapabilityDef(
        "kf30", "key_f30", "FK", "F30 function key"
    ),
    "kf31": CapabilityDef(
        "kf31", "key_f31", "FL", "F31 function key"
    ),
    "kf32": CapabilityDef(
        "kf32", "key_f32", "FM", "F32 function key"
    ),
    "kf33": CapabilityDef(
        "kf33", "key_f33", "FN", "F33 function key"
    ),
    "kf34": CapabilityDef(
        "kf34", "key_f34", "FO", "F34 function key"
    ),
    "kf35": CapabilityDef(
        "kf35", "key_f35", "FP", "F35 function key"
    ),
    "kf36": CapabilityDef(
        "kf36", "key_f36", "FQ", "F36 function key"
    ),
    "kf37": CapabilityDef(
        "kf37", "key_f37", "FR", "F37 function key"
    ),
    "kf38": CapabilityDef(
        "kf38", "key_f38", "FS", "F38 function key"
    ),
    "kf39": CapabilityDef(
        "kf39", "key_f39", "FT", "F39 function key"
    ),
    "kf4": CapabilityDef(
        "kf4", "key_f4", "k4", "F4 function key"
    ),
    "kf40": CapabilityDef(
        "kf40", "key_f40", "FU", "F40 function key"
    ),
    "kf41": CapabilityDef(
        "kf41", "key_f41", "FV", "F41 function key"
    ),
    "kf42": CapabilityDef(
        "kf42", "key_f42", "FW", "F42 function key"
    ),
    "kf43": CapabilityDef(
        "kf43", "key_f43", "FX", "F43 function key"
    ),
    "kf44": CapabilityDef(
        "kf44", "key_f44", "FY", "F44 function key"
    ),
    "kf45": CapabilityDef(
        "kf45", "key_f45", "FZ", "F45 function key"
    ),
    "kf46": CapabilityDef(
        "kf46", "key_f46", "Fa", "F46 function key"
    ),
    "kf47": CapabilityDef(
        "kf47", "key_f47", "Fb", "F47 function key"
    ),
    "kf48": CapabilityDef(
        "kf48", "key_f48", "Fc", "F48 function key"
    ),
    "kf49": CapabilityDef(
        "kf49", "key_f49", "Fd", "F49 function key"
    ),
    "kf5": CapabilityDef(
        "kf5", "key_f5", "k5", "F5 function key"
    ),
    "kf50": CapabilityDef(
        "kf50", "key_f50", "Fe", "F50 function key"
    ),
    "kf51": CapabilityDef(
        "kf51", "key_f51", "Ff", "F51 function key"
    ),
    "kf52": CapabilityDef(
        "kf52", "key_f52", "Fg", "F52 function key"
    ),
    "kf53": CapabilityDef(
        "kf53", "key_f53", "Fh", "F53 function key"
    ),
    "kf54": CapabilityDef(
        "kf54", "key_f54", "Fi", "F54 function key"
    ),
    "kf55": CapabilityDef(
        "kf55", "key_f55", "Fj", "F55 function key"
    ),
    "kf56": CapabilityDef(
        "kf56", "key_f56", "Fk", "F56 function key"
    ),
    "kf57": CapabilityDef(
        "kf57", "key_f57", "Fl", "F57 function key"
    ),
    "kf58": CapabilityDef(
        "kf58", "key_f58", "Fm", "F58 function key"
    ),
    "kf59": CapabilityDef(
        "kf59", "key_f59", "Fn", "F59 function key"
    ),
    "kf6": CapabilityDef(
        "kf6", "key_f6", "k6", "F6 function key"
    ),
    "kf60": CapabilityDef(
        "kf60", "key_f60", "Fo", "F60 function key"
    ),
    "kf61": CapabilityDef(
        "kf61", "key_f61", "Fp", "F61 function key"
    ),
    "kf62": CapabilityDef(
        "kf62", "key_f62", "Fq", "F62 function key"
    ),
    "kf63": CapabilityDef(
        "kf63", "key_f63", "Fr", "F63 function key"
    ),
    "kf7": CapabilityDef(
        "kf7", "key_f7", "k7", "F7 function key"
    ),
    "kf8": CapabilityDef(
        "kf8", "key_f8", "k8", "F8 function key"
    ),
    "kf9": CapabilityDef(
        "kf9", "key_f9", "k9", "F9 function key"
    ),
    "kfnd": CapabilityDef(
        "kfnd", "key_find", "@0", "find key"
    ),
    "khlp": CapabilityDef(
        "khlp", "key_help", "%1", "help key"
    ),
    "khome": CapabilityDef(
        "khome", "key_home", "kh", "home key"
    ),
    "kich1": CapabilityDef(
        "kich1", "key_ic", "kI", "insert-character key"
    ),
    "kil1": CapabilityDef(
        "kil1", "key_il", "kA", "insert-line key"
    ),
    "kcub1": CapabilityDef(
        "kcub1", "key_left", "kl", "left-arrow key"
    ),
    "kll": CapabilityDef(
        "kll", "key_ll", "kH", "lower-left key (home down)"
    ),
    "kmrk": CapabilityDef(
        "kmrk", "key_mark", "%2", "mark key"
    ),
    "kmsg": CapabilityDef(
        "kmsg", "key_message", "%3", "message key"
    ),
    "kmov": CapabilityDef(
        "kmov", "key_move", "%4", "move key"
    ),
    "knxt": CapabilityDef(
        "knxt", "key_next", "%5", "next key"
    ),
    "knp": CapabilityDef(
        "knp", "key_npage", "kN", "next-page key"
    ),
    "kopn": CapabilityDef(
        "kopn", "key_open", "%6", "open key"
    ),
    "kopt": CapabilityDef(
        "kopt", "key_options", "%7", "options key"
    ),
    "kpp": CapabilityDef(
        "kpp", "key_ppage", "kP", "previous-page key"
    ),
    "kprv": CapabilityDef(
        "kprv", "key_previous", "%8", "previous key"
    ),
    "kprt": CapabilityDef(
        "kprt", "key_print", "%9", "print key"
    ),
    "krdo": CapabilityDef(
        "krdo", "key_redo", "%0", "redo key"
    ),
    "kref": CapabilityDef(
        "kref", "key_reference", "&1", "reference key"
    ),
    "krfr": CapabilityDef(
        "krfr", "key_refresh", "&2", "refresh key"
    ),
    "krpl": CapabilityDef(
        "krpl", "key_replace", "&3", "replace key"
    ),
    "krst": CapabilityDef(
        "krst", "key_restart", "&4", "restart key"
    ),
    "kres": CapabilityDef(
        "kres", "key_resume", "&5", "resume key"
    ),
    "kcuf1": CapabilityDef(
        "kcuf1", "key_right", "kr", "right-arrow key"
    ),
    "ksav": CapabilityDef(
        "ksav", "key_save", "&6", "save key"
    ),
    "kBEG": CapabilityDef(
        "kBEG", "key_sbeg", "&9", "shifted begin key"
    ),
    "kCAN": CapabilityDef(
        "kCAN", "key_scancel", "&0", "shifted cancel key"
    ),
    "kCMD": CapabilityDef(
        "kCMD", "key_scommand", "*1", "shifted command key"
    ),
    "kCPY": CapabilityDef(
        "kCPY", "key_scopy", "*2", "shifted copy key"
    ),
    "kCRT": CapabilityDef(
        "kCRT", "key_screate", "*3", "shifted create key"
    ),
    "kDC": CapabilityDef(
        "kDC", "key_sdc", "*4", "shifted delete-character key"
    ),
    "kDL": CapabilityDef(
        "kDL", "key_sdl", "*5", "shifted delete-line key"
    ),
    "kslt": CapabilityDef(
        "kslt", "key_select", "*6", "select key"
    ),
    "kEND": CapabilityDef(
        "kEND", "key_send", "*7", "shifted end key"
    ),
    "kEOL": CapabilityDef(
        "kEOL", "key_seol", "*8", "shifted clear-to-end-of-line key"
    ),
    "kEXT": CapabilityDef(
        "kEXT", "key_sexit", "*9", "shifted exit key"
    ),
    "kind": CapabilityDef(
        "kind", "key_sf", "kF", "scroll-forward key"
    ),
    "kFND": CapabilityDef(
        "kFND", "key_sfind", "*0", "shifted find key"
    ),
    "kHLP": CapabilityDef(
        "kHLP", "key_shelp", "#1", "shifted help key"
    ),
    "kHOM": CapabilityDef(
        "kHOM", "key_shome", "#2", "shifted home key"
    ),
    "kIC": CapabilityDef(
        "kIC", "key_sic", "#3", "shifted insert-character key"
    ),
    "kLFT": CapabilityDef(
        "kLFT", "key_sleft", "#4", "shifted left-arrow key"
    ),
    "kMSG": CapabilityDef(
        "kMSG", "key_smessage", "%a", "shifted message key"
    ),
    "kMOV": CapabilityDef(
        "kMOV", "key_smove", "%b", "shifted move key"
    ),
    "kNXT": CapabilityDef(
        "kNXT", "key_snext", "%c", "shifted next key"
    ),
    "kOPT": CapabilityDef(
        "kOPT", "key_soptions", "%d", "shifted options key"
    ),
    "kPRV": CapabilityDef(
        "kPRV", "key_sprevious", "%e", "shifted previous key"
    ),
    "kPRT": CapabilityDef(
        "kPRT", "key_sprint", "%f", "shifted print key"
    ),
    "kri": CapabilityDef(
        "kri", "key_sr", "kR", "scroll-backward key"
    ),
    "kRDO": CapabilityDef(
        "kRDO", "key_sredo", "%g", "shifted redo key"
    ),
    "kRPL": CapabilityDef(
        "kRPL", "key_sreplace", "%h", "shifted replace key"
    ),
    "kRIT": CapabilityDef(
        "kRIT", "key_sright", "%i", "shifted right-arrow key"
    ),
    "kRES": CapabilityDef(
        "kRES", "key_srsume", "%j", "shifted resume key"
    ),
    "kSAV": CapabilityDef(
        "kSAV", "key_ssave", "!1", "shifted save key"
    ),
    "kSPD": CapabilityDef(
        "kSPD", "key_ssuspend", "!2", "shifted suspend key"
    ),
    "khts": CapabilityDef(
        "khts", "key_stab", "kT", "set-tab key"
    ),
    "kUND": CapabilityDef(
        "kUND", "key_sundo", "!3", "shifted undo key"
    ),
    "kspd": CapabilityDef(
        "kspd", "key_suspend", "&7", "suspend key"
    ),
    "kund": CapabilityDef(
        "kund", "key_undo", "&8", "undo key"
    ),
    "kcuu1": CapabilityDef(
        "kcuu1", "key_up", "ku", "up-arrow key"
    ),
    "rmkx": CapabilityDef(
        "rmkx", "keypad_local", "ke", "leave 'keyboard_transmit' mode"
    ),
    "smkx": CapabilityDef(
        "smkx", "keypad_xmit", "ks", "enter 'keyboard_transmit' mode"
    ),
    "lf0": CapabilityDef(
        "lf0", "lab_f0", "l0", "label on function key f0 if not f0"
    ),
    "lf1": CapabilityDef(
        "lf1", "lab_f1", "l1", "label on function key f1 if not f1"
    ),
    "lf10": CapabilityDef(
        "lf10", "lab_f10", "la", "label on function key f10 if not f10"
    ),
    "lf2": CapabilityDef(
        "lf2", "lab_f2", "l2", "label on function key f2 if not f2"
    ),
    "lf3": CapabilityDef(
        "lf3", "lab_f3", "l3", "label on function key f3 if not f3"
    ),
    "lf4": CapabilityDef(
        "lf4", "lab_f4", "l4", "label on function key f4 if not f4"
    ),
    "lf5": CapabilityDef(
        "lf5", "lab_f5", "l5", "label on function key f5 if not f5"
    ),
    "lf6": CapabilityDef(
        "lf6", "lab_f6", "l6", "label on function key f6 if not f6"
    ),
    "lf7": CapabilityDef(
        "lf7", "lab_f7", "l7", "label on function key f7 if not f7"
    ),
    "lf8": CapabilityDef(
        "lf8", "lab_f8", "l8", "label on function key f8 if not f8"
    ),
    "lf9": CapabilityDef(
        "lf9", "lab_f9", "l9", "label on function key f9 if not f9"
    ),
    "fln": CapabilityDef(
        "fln", "label_format", "Lf", "label format"
    ),
    "rmln": CapabilityDef(
        "rmln", "label_off", "LF", "turn off soft labels"
    ),
    "smln": CapabilityDef(
        "smln", "label_on", "LO", "turn on soft labels"
    ),
    "rmm": CapabilityDef(
        "rmm", "meta_off", "mo", "turn off meta mode"
    ),
    "smm": CapabilityDef(
        "smm", "meta_on", "mm", "turn on meta mode (8th-bit on)"
    ),
    "mhpa": CapabilityDef(
        "mhpa", "micro_column_address", "ZY", "Like column_address in micro mode"
    ),
    "mcud1": CapabilityDef(
        "mcud1", "micro_down", "ZZ", "Like cursor_down in micro mode"
    ),
    "mcub1": CapabilityDef(
        "mcub1", "micro_left", "Za", "Like cursor_left in micro mode"
    ),
    "mcuf1": CapabilityDef(
        "mcuf1", "micro_right", "Zb", "Like cursor_right in micro mode"
    ),
    "mvpa": CapabilityDef(
        "mvpa", "micro_row_address", "Zc", "Like row_address #1 in micro mode"
    ),
    "mcuu1": CapabilityDef(
        "mcuu1", "micro_up", "Zd", "Like cursor_up in micro mode"
    ),
    "nel": CapabilityDef(
        "nel", "newline", "nw", "newline (behave like cr followed by lf)"
    ),
    "porder": CapabilityDef(
        "porder", "order_of_pins", "Ze", "Match software bits to print-head pins"
    ),
    "oc": CapabilityDef(
        "oc", "orig_colors", "oc", "Set all color pairs to the original ones"
    ),
    "op": CapabilityDef(
        "op", "orig_pair", "op", "Set default pair to its original value"
    ),
    "pad": CapabilityDef(
        "pad", "pad_char", "pc", "padding char (instead of null)"
    ),
    "dch": CapabilityDef(
        "dch", "parm_dch", "DC", "delete #1 characters (P*)"
    ),
    "dl": CapabilityDef(
        "dl", "parm_delete_line", "DL", "delete #1 lines (P*)"
    ),
    "cud": CapabilityDef(
        "cud", "parm_down_cursor", "DO", "down #1 lines (P*)"
    ),
    "mcud": CapabilityDef(
        "mcud", "parm_down_micro", "Zf", "Like parm_down_cursor in micro mode"
    ),
    "ich": CapabilityDef(
        "ich", "parm_ich", "IC", "insert #1 characters (P*)"
    ),
    "indn": CapabilityDef(
        "indn", "parm_index", "SF", "scroll forward #1 lines (P)"
    ),
    "il": CapabilityDef(
        "il", "parm_insert_line", "AL", "insert #1 lines (P*)"
    ),
    "cub": CapabilityDef(
        "cub", "parm_left_cursor", "LE", "move #1 characters to the left (P)"
    ),
    "mcub": CapabilityDef(
        "mcub", "parm_left_micro", "Zg", "Like parm_left_cursor in micro mode"
    ),
    "cuf": CapabilityDef(
        "cuf", "parm_right_cursor", "RI", "move #1 characters to the right (P*)"
    ),
    "mcuf": CapabilityDef(
        "mcuf", "parm_right_micro", "Zh", "Like parm_right_cursor in micro mode"
    ),
    "rin": CapabilityDef(
        "rin", "parm_rindex", "SR", "scroll back #1 lines (P)"
    ),
    "cuu": CapabilityDef(
        "cuu", "parm_up_cursor", "UP", "up #1 lines (P*)"
    ),
    "mcuu": CapabilityDef(
        "mcuu", "parm_up_micro", "Zi", "Like parm_up_cursor in micro mode"
    ),
    "pfkey": CapabilityDef(
        "pfkey", "pkey_key", "pk", "program function key #1 to type string #2"
    ),
    "pfloc": CapabilityDef(
        "pfloc", "pkey_local", "pl", "program function key #1 to execute string #2"
    ),
    "pfx": CapabilityDef(
        "pfx", "pkey_xmit", "px", "program function key #1 to transmit string #2"
    ),
    "pln": CapabilityDef(
        "pln", "plab_norm", "pn", "program label #1 to show string #2"
    ),
    "mc0": CapabilityDef(
        "mc0", "print_screen", "ps", "print contents of screen"
    ),
    "mc5p": CapabilityDef(
        "mc5p", "prtr_non", "pO", "turn on printer for #1 bytes"
    ),
    "mc4": CapabilityDef(
        "mc4", "prtr_off", "pf", "turn off printer"
    ),
    "mc5": CapabilityDef(
        "mc5", "prtr_on", "po", "turn on printer"
    ),
    "pulse": CapabilityDef(
        "pulse", "pulse", "PU", "select pulse dialing"
    ),
    "qdial": CapabilityDef(
        "qdial", "quick_dial", "QD", "dial number #1 without checking"
    ),
    "rmclk": CapabilityDef(
        "rmclk", "remove_clock", "RC", "remove clock"
    ),
    "rep": CapabilityDef(
        "rep", "repeat_char", "rp", "repeat char #1 #2 times (P*)"
    ),
    "rfi": CapabilityDef(
        "rfi", "req_for_input", "RF", "send next input char (for ptys)"
    ),
    "rs1": CapabilityDef(
        "rs1", "reset_1string", "r1", "reset string"
    ),
    "rs2": CapabilityDef(
        "rs2", "reset_2string", "r2", "reset string"
    ),
    "rs3": CapabilityDef(
        "rs3", "reset_3string", "r3", "reset string"
    ),
    "rf": CapabilityDef(
        "rf", "reset_file", "rf", "name of reset file"
    ),
    "rc": CapabilityDef(
        "rc", "restore_cursor", "rc", "restore cursor to position of last save_cursor"
    ),
    "vpa": CapabilityDef(
        "vpa", "row_address", "cv", "vertical position #1 absolute (P)"
    ),
    "sc": CapabilityDef(
        "sc", "save_cursor", "sc", "save current cursor position (P)"
    ),
    "ind": CapabilityDef(
        "ind", "scroll_forward", "sf", "scroll text up (P)"
    ),
    "ri": CapabilityDef(
        "ri", "scroll_reverse", "sr", "scroll text down (P)"
    ),
    "scs": CapabilityDef(
        "scs", "select_char_set", "Zj", "Select character set, #1"
    ),
    "sgr": CapabilityDef(
        "sgr", "set_attributes", "sa", "define video attributes #1-#9 (PG9)"
    ),
    "setb": CapabilityDef(
        "setb", "set_background", "Sb", "Set background color #1"
    ),
    "smgb": CapabilityDef(
        "smgb", "set_bottom_margin", "Zk", "Set bottom margin at current line"
    ),
    "smgbp": CapabilityDef(
        "smgbp", "set_bottom_margin_parm", "Zl", "Set bottom margin at line #1 or (if smgtp is not given) #2 lines from bottom"
    ),
    "sclk": CapabilityDef(
        "sclk", "set_clock", "SC", "set clock, #1 hrs #2 mins #3 secs"
    ),
    "scp": CapabilityDef(
        "scp", "set_color_pair", "sp", "Set current color pair to #1"
    ),
    "setf": CapabilityDef(
        "setf", "set_foreground", "Sf", "Set foreground color #1"
    ),
    "smgl": CapabilityDef(
        "smgl", "set_left_margin", "ML", "set left soft margin at current column. See smgl. (ML is not in BSD termcap)."
    ),
    "smglp": CapabilityDef(
        "smglp", "set_left_margin_parm", "Zm", "Set left (right) margin at column #1"
    ),
    "smgr": CapabilityDef(
        "smgr", "set_right_margin", "MR", "set right soft margin at current column"
    ),
    "smgrp": CapabilityDef(
        "smgrp", "set_right_margin_parm", "Zn", "Set right margin at column #1"
    ),
    "hts": CapabilityDef(
        "hts", "set_tab", "st", "set a tab in every row, current columns"
    ),
    "smgt": CapabilityDef(
        "smgt", "set_top_margin", "Zo", "Set top margin at current line"
    ),
    "smgtp": CapabilityDef(
        "smgtp", "set_top_margin_parm", "Zp", "Set top (bottom) margin at row #1"
    ),
    "wind": CapabilityDef(
        "wind", "set_window", "wi", "current window is lines #1-#2 cols #3-#4"
    ),
    "sbim": CapabilityDef(
        "sbim", "start_bit_image", "Zq", "Start printing bit image graphics"
    ),
    "scsd": CapabilityDef(
        "scsd", "start_char_set_def", "Zr", "Start character set definition #1, with #2 characters in the set"
    ),
    "rbim": CapabilityDef(
        "rbim", "stop_bit_image", "Zs", "Stop printing bit image graphics"
    ),
    "rcsd": CapabilityDef(
        "rcsd", "stop_char_set_def", "Zt", "End definition of character set #1"
    ),
    "subcs": CapabilityDef(
        "subcs", "subscript_characters", "Zu", "List of subscriptable characters"
    ),
    "supcs": CapabilityDef(
        "supcs", "superscript_characters", "Zv", "List of superscriptable characters"
    ),
    "ht": CapabilityDef(
        "ht", "tab", "ta", "tab to next 8-space hardware tab stop"
    ),
    "docr": CapabilityDef(
        "docr", "these_cause_cr", "Zw", "Printing any of these characters causes CR"
    ),
    "tsl": CapabilityDef(
        "tsl", "to_status_line", "ts", "move to status line, column #1"
    ),
    "tone": CapabilityDef(
        "tone", "tone", "TO", "select touch tone dialing"
    ),
    "uc": CapabilityDef(
        "uc", "underline_char", "uc", "underline char and move past it"
    ),
    "hu": CapabilityDef(
        "hu", "up_half_line", "hu", "half a line up"
    ),
    "u0": CapabilityDef(
        "u0", "user0", "u0", "User string #0"
    ),
    "u1": CapabilityDef(
        "u1", "user1", "u1", "User string #1"
    ),
    "u2": CapabilityDef(
        "u2", "user2", "u2", "User string #2"
    ),
    "u3": CapabilityDef(
        "u3", "user3", "u3", "User string #3"
    ),
    "u4": CapabilityDef(
        "u4", "user4", "u4", "User string #4"
    ),
    "u5": CapabilityDef(
        "u5", "user5", "u5", "User string #5"
    ),
    "u6": CapabilityDef(
        "u6", "user6", "u6", "User string #6"
    ),
    "u7": CapabilityDef(
        "u7", "user7", "u7", "User string #7"
    ),
    "u8": CapabilityDef(
        "u8", "user8", "u8", "User string #8"
    ),
    "u9": CapabilityDef(
        "u9", "user9", "u9", "User string #9"
    ),
    "wait": CapabilityDef(
        "wait", "wait_tone", "WA", "wait for dial-tone"
    ),
    "xoffc": CapabilityDef(
        "xoffc", "xoff_character", "XF", "XOFF character"
    ),
    "xonc": CapabilityDef(
        "xonc", "xon_character", "XN", "XON character"
    ),
    "zerom": CapabilityDef(
        "zerom", "zero_motion", "Zx", "No motion for subsequent character"
    ),
    "scesa": CapabilityDef(
        "scesa", "alt_scancode_esc", "S8", "Alternate escape for scancode emulation"
    ),
    "bicr": CapabilityDef(
        "bicr", "bit_image_carriage_return", "Yv", "Move to beginning of same row"
    ),
    "binel": CapabilityDef(
        "binel", "bit_image_newline", "Zz", "Move to next row of the bit image"
    ),
    "birep": CapabilityDef(
        "birep", "bit_image_repeat", "Xy", "Repeat bit image cell #1 #2 times"
    ),
    "csnm": CapabilityDef(
        "csnm", "char_set_names", "Zy", "Produce #1'th item from list of character set names"
    ),
    "csin": CapabilityDef(
        "csin", "code_set_init", "ci", "Init sequence for multiple codesets"
    ),
    "colornm": CapabilityDef(
        "colornm", "color_names", "Yw", "Give name for color #1"
    ),
    "defbi": CapabilityDef(
        "defbi", "define_bit_image_region", "Yx", "Define rectangualar bit image region"
    ),
    "devt": CapabilityDef(
        "devt", "device_type", "dv", "Indicate language/codeset support"
    ),
    "dispc": CapabilityDef(
        "dispc", "display_pc_char", "S1", "Display PC character #1"
    ),
    "endbi": CapabilityDef(
        "endbi", "end_bit_image_region", "Yy", "End a bit-image region"
    ),
    "smpch": CapabilityDef(
        "smpch", "enter_pc_charset_mode", "S2", "Enter PC character display mode"
    ),
    "smsc": CapabilityDef(
        "smsc", "enter_scancode_mode", "S4", "Enter PC scancode mode"
    ),
    "rmpch": CapabilityDef(
        "rmpch", "exit_pc_charset_mode", "S3", "Exit PC character display mode"
    ),
    "rmsc": CapabilityDef(
        "rmsc", "exit_scancode_mode", "S5", "Exit PC scancode mode"
    ),
    "getm": CapabilityDef(
        "getm", "get_mouse", "Gm", "Curses should get button events, parameter #1 not documented."
    ),
    "kmous": CapabilityDef(
        "kmous", "key_mouse", "Km", "Mouse event has occurred"
    ),
    "minfo": CapabilityDef(
        "minfo", "mouse_info", "Mi", "Mouse status information"
    ),
    "pctrm": CapabilityDef(
        "pctrm", "pc_term_options", "S6", "PC terminal options"
    ),
    "pfxl": CapabilityDef(
        "pfxl", "pkey_plab", "xl", "Program function key #1 to type string #2 and show string #3"
    ),
    "reqmp": CapabilityDef(
        "reqmp", "req_mouse_pos", "RQ", "Request mouse position"
    ),
    "scesc": CapabilityDef(
        "scesc", "scancode_escape", "S7", "Escape for scancode emulation"
    ),
    "s0ds": CapabilityDef(
        "s0ds", "set0_des_seq", "s0", "Shift to codeset 0 (EUC set 0, ASCII)"
    ),
    "s1ds": CapabilityDef(
        "s1ds", "set1_des_seq", "s1", "Shift to codeset 1"
    ),
    "s2ds": CapabilityDef(
        "s2ds", "set2_des_seq", "s2", "Shift to codeset 2"
    ),
    "s3ds": CapabilityDef(
        "s3ds", "set3_des_seq", "s3", "Shift to codeset 3"
    ),
    "setab": CapabilityDef(
        "setab", "set_a_background", "AB", "Set background color to #1, using ANSI escape"
    ),
    "setaf": CapabilityDef(
        "setaf", "set_a_foreground", "AF", "Set foreground color to #1, using ANSI escape"
    ),
    "setcolor": CapabilityDef(
        "setcolor", "set_color_band", "Yz", "Change to ribbon color #1"
    ),
    "smglr": CapabilityDef(
        "smglr", "set_lr_margin", "ML", "Set both left and right margins to #1, #2. (ML is not in BSD termcap)."
    ),
    "slines": CapabilityDef(
        "slines", "set_page_length", "YZ", "Set page length to #1 lines"
    ),
    "smgtb": CapabilityDef(
        "smgtb", "set_tb_margin", "MT", "Sets both top and bottom margins to #1, #2"
    ),
    "ehhlm": CapabilityDef(
        "ehhlm", "enter_horizontal_hl_mode", "Xh", "Enter horizontal highlight mode"
    ),
    "elhlm": CapabilityDef(
        "elhlm", "enter_left_hl_mode", "Xl", "Enter left highlight mode"
    ),
    "elohlm": CapabilityDef(
        "elohlm", "enter_low_hl_mode", "Xo", "Enter low highlight mode"
    ),
    "erhlm": CapabilityDef(
        "erhlm", "enter_right_hl_mode", "Xr", "Enter right highlight mode"
    ),
    "ethlm": CapabilityDef(
        "ethlm", "enter_top_hl_mode", "Xt", "Enter top highlight mode"
    ),
    "evhlm": CapabilityDef(
        "evhlm", "enter_vertical_hl_mode", "Xv", "Enter vertical highlight mode"
    ),
    "sgr1": CapabilityDef(
        "sgr1", "set_a_attributes", "sA", "Define second set of video attributes #1-#6"
    ),
    "slength": CapabilityDef(
        "slength", "set_pglen_inch", "sL", "YI Set page length to #1 hundredth of an inch"
    ),
})
