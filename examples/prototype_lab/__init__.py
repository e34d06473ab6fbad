"""Terminal front end for the prototype lab."""
