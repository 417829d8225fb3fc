import struct

# --- File signature ---
FV1_MAGIC = b"FNT1"

# --- Header layout (48 bytes) ---
# magic(4) family(32) size(2) style(2) reserved(8), little-endian
HEADER_STRUCT = struct.Struct("<4s32shh8x")
HEADER_SIZE = HEADER_STRUCT.size
FAMILY_NAME_SIZE = 32
FAMILY_NAME_ENCODING = "latin-1"

# --- Glyph record layout (16 bytes + bitmap) ---
# width(2) height(2) baseline(2) offset(2) incby(2)
GLYPH_META_STRUCT = struct.Struct("<hhhhh")
GLYPH_META_SIZE = GLYPH_META_STRUCT.size
GLYPH_PADDING_SIZE = 6
GLYPH_RECORD_SIZE = GLYPH_META_SIZE + GLYPH_PADDING_SIZE

# --- Codepoint range ---
FIRST_CODEPOINT = 32      # first printable ASCII value
END_CODEPOINT = 0x4E00    # exclusive upper bound
GLYPH_COUNT = END_CODEPOINT - FIRST_CODEPOINT

# --- Bitmap alignment ---
ROW_ALIGN_BITS = 8        # each row starts on a byte boundary
BITMAP_ALIGN_BYTES = 4    # total payload padded to a 4-byte multiple
