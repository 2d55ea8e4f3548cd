"""Cell-based terminal renderer, monospace font, icon characters and colour themes."""