# backend/logger.py

import logging

# Configure a single “moodtags” logger here
logger = logging.getLogger("moodtags")
handler = logging.StreamHandler()
formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
handler.setFormatter(formatter)
logger.addHandler(handler)
logger.setLevel(logging.INFO)
