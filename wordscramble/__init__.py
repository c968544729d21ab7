"""Word Scramble: build words from the letters of a root word."""
