"""Domain types shared by the call tests and the pytest wiring."""
