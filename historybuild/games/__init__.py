"""Game implementations (card lists and starting decks)."""
