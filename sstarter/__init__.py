"""sstarter - manage long-running programs through a graceful-restart helper."""
