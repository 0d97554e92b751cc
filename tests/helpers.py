CODESHARE_LINE = (
    "UAN069/070 ABCD Not a real airport to WXYZ Also not a real airport with Air Seattle codeshare"
)
PLAIN_LINE = "UAN000/001 KDEN Denver to KBOI Boise"
GARBAGE_LINE = "garbage text"


def write_routes(path, lines, newline="\n"):
    """Write route lines to `path` using the given terminator, one per line."""
    path.write_bytes("".join(line + newline for line in lines).encode("utf-8"))
    return path
