"""Solution for 2022 day 20."""