import os
from dotenv import load_dotenv

load_dotenv()

BASE_URL = os.getenv("HITPARADE_BASE_URL", "https://www.swr-vote.de/swr1bw-hitparade-2025")
MAX_PAGES = int(os.getenv("HITPARADE_MAX_PAGES", "106"))
OUTPUT_FILE = os.getenv("HITPARADE_OUTPUT_FILE", "public/swr1_songs.json")

# Substring a teaser URL must contain to count as playable audio
AUDIO_MARKER = os.getenv("HITPARADE_AUDIO_MARKER", ".mp3")

# raw = scan the whole response body, scripts = only <script> contents
EXTRACT_MODE = os.getenv("HITPARADE_EXTRACT_MODE", "raw").lower()

# Unset means no timeout (requests default)
_timeout = os.getenv("HITPARADE_REQUEST_TIMEOUT", "").strip()
REQUEST_TIMEOUT = float(_timeout) if _timeout else None
