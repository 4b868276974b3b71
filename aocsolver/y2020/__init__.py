"""Solutions for 2020 days 1, 4, 12, 16 and 21."""