"""Domain layer of ibanparse."""
