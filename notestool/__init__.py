"""Personal note-taking command-line utility."""
