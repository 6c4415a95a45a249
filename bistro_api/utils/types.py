from typing import Literal

# Literal restricts the accepted values
ResourceName = Literal["employee", "timesheet", "menu", "menuItem"]

# Required payload fields for each resource, and the 400 message when one is missing
REQUIRED_FIELDS = {
    "employee": ["name", "position", "wage"],
    "timesheet": ["hours", "rate", "date"],
    "menu": ["title"],
    "menuItem": ["name", "inventory", "price"],
}

MISSING_FIELDS_MESSAGES = {
    "employee": "Please provide name, position, and wage",
    "timesheet": "Missing required fields",
    "menu": "title is required",
    "menuItem": "missing required fields",
}

NOT_FOUND_MESSAGES = {
    "employee": "Employee not found",
    "timesheet": "Timesheet not found",
    "menu": "menu not found",
    "menuItem": "menuItem not found",
}
