"""Week calendar dates, labels, choices, form input parsing and card text for WODs."""