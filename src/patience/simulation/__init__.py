"""Game state, deal, move generation and transitions."""
