"""systemd backend."""
