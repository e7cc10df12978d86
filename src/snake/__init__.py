"""Grid snake: game state, draw commands and a pygame host."""
