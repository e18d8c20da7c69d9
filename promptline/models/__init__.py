"""Plain data types shared by the prompting logic."""
