import os


LOG_LEVEL = os.getenv('PLAYLIST_LOG_LEVEL', 'INFO').upper()
LOG_FILE = os.getenv('PLAYLIST_LOG_FILE')
