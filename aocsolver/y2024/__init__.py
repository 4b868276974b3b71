"""Solutions for 2024 days 2, 4, 6, 10 and 14."""