# backend/patterns.py

"""
Pre-compiled regex patterns.
Compiled once at module load time and reused throughout the application.
"""

import re

# A valid hashtag: "#" followed by 2-30 lowercase letters, digits, "_" or "-"
TAG_PATTERN = re.compile(r'^#[a-z0-9_-]{2,30}$')
