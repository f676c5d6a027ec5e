BLOCK_SIZE = 4096  # bytes generated per write

UNIT_MULTIPLIERS = {
    "k": 1024,
    "m": 1024 ** 2,
    "g": 1024 ** 3,
    "t": 1024 ** 4,
}
