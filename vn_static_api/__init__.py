"""Static, paginated JSON API generator for visual-novel datasets."""
