"""Classic Color Lines: five colours, lines found anywhere on the board."""