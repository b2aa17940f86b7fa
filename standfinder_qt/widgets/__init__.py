"""Qt widgets and painters for Stand Finder."""
