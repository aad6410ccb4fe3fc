"""Terminal front end for the backpack."""
