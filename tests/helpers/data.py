import time

NOW = time.time()

# (path, size, mode, mod_time, data) as a population tool would emit them
SAMPLE_ENTRIES = [
    ("foo", 4, 0o100644, NOW, b"1234"),
    ("bar", 8, 0o100645, NOW, b"98765432"),
    ("d/alpha", 8, 0o100645, NOW, b"98765432"),
    ("d/beta", 8, 0o100645, NOW, b"98765432"),
    ("d/gamma", 8, 0o100645, NOW, b"98765432"),
]
