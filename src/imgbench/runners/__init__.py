"""Sequential and threaded benchmark runners."""
