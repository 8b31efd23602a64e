import os

# Logging level for the shared "kanatype" logger
LOG_LEVEL = os.getenv("KANATYPE_LOG_LEVEL", "INFO").upper()

# What chunkers do with input they cannot chunk: "skip" or "raise"
UNRECOGNIZED_POLICY = os.getenv("KANATYPE_UNRECOGNIZED_POLICY", "skip").lower()

# Fixed strings fed through the diagnostic driver
SAMPLE_TEXTS = [
    "京(とかんだと)",
    "おちゃをのむ",
    "11(じゅういち)月(がつ)1日(ついたち)",
    "山(やま)ノ内(うち)町(まち)",
    "ノ内(うち)",
]
