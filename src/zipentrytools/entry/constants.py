MAX_FIELD_LENGTH = 0xFFFF  # 16-bit length fields (name, extra, comment)
MAX_UINT32 = 0xFFFFFFFF  # CRC-32 and size fields

DOS_EPOCH_YEAR = 1980
DOS_MAX_YEAR = DOS_EPOCH_YEAR + 0x7F

# 1980-01-01 00:00:00
MIN_DOS_TIME = (1 << 21) | (1 << 16)
# 2107-12-31 23:59:58
MAX_DOS_TIME = (0x7F << 25) | (12 << 21) | (31 << 16) | (23 << 11) | (59 << 5) | 29

MAX_BYTES_PER_CHAR = 4  # UTF-8, counted per code point

UTF8_FLAG = 0x800  # general purpose bit 11, name/comment are UTF-8
