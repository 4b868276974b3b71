"""Solutions for 2023 days 6, 7, 10, 16, 20 and 24."""