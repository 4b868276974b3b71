"""Solutions for 2021 days 1, 3, 5, 6, 9, 10, 14, 17 and 20."""