"""Application settings."""

import os
from pathlib import Path

# Topic extraction
TOPIC_COUNT = int(os.getenv("REVIEWS_TOPIC_COUNT", "2"))
TERMS_PER_TOPIC = int(os.getenv("REVIEWS_TERMS_PER_TOPIC", "3"))
LDA_RANDOM_STATE = int(os.getenv("REVIEWS_LDA_RANDOM_STATE", "0"))
LDA_MAX_ITER = int(os.getenv("REVIEWS_LDA_MAX_ITER", "20"))

# Sentiment
LEXICON_LANGUAGE = os.getenv("REVIEWS_LEXICON_LANGUAGE", "en")

# Logging
LOG_DIR = Path(os.getenv("REVIEWS_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("REVIEWS_LOG_LEVEL", "INFO")
