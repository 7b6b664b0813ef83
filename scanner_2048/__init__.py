"""Read the tile values of an on-screen 2048 board from pixel colors."""
