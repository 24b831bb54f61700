"""
Default configuration values for embedplayer.

Note: Overrides are resolved by config/loader.py, which supports environment
variables (EMBEDPLAYER_*), project config, and user config.
"""

# Logical screen height used when sizing YouTube Shorts
DEFAULT_SCREEN_HEIGHT = 800

# Twitch refuses to embed without a parent host; used outside a browser
DEFAULT_PARENT_HOST = "localhost"

# Wrapper page that hosts the YouTube iframe API player
DEFAULT_YOUTUBE_IFRAME_URL = "https://bsky.app/iframe/youtube.html"

# Screens shorter than this get a more aggressively scaled Shorts player
SMALL_SCREEN_HEIGHT = 600

# Display height ceiling for GIFs
GIF_MAX_HEIGHT = 250
