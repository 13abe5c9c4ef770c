"""wikicrawl — fetch a fixed list of pages into JSON Lines records and raw HTML."""
