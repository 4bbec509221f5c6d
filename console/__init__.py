"""Text console front end for a single blackjack round."""
