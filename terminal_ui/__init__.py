"""Curses front-end for the blackjack engine."""
