from pydantic import BaseModel, ConfigDict, Field, field_validator
import datetime
from typing import Optional

# Every field is optional so that missing values reach the required-field
# checks in the routers and come back as 400 with the resource's message.

# Input schema for Employee
class EmployeeIn(BaseModel):
    name: Optional[str] = None
    position: Optional[str] = None
    wage: Optional[float] = None

# Input schema for Timesheet
class TimesheetIn(BaseModel):
    hours: Optional[float] = None
    rate: Optional[float] = None
    date: Optional[datetime.date] = None

# Input schema for Menu
class MenuIn(BaseModel):
    title: Optional[str] = None

# Input schema for MenuItem
class MenuItemIn(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    inventory: Optional[int] = None
    price: Optional[float] = None

# Request envelopes: {"employee": {...}}, {"menuItem": {...}}, ...
class EmployeeEnvelope(BaseModel):
    employee: EmployeeIn = Field(default_factory=EmployeeIn)

    # A null envelope is treated like an empty one
    @field_validator("employee", mode="before")
    @classmethod
    def null_employee(cls, value):
        return {} if value is None else value

class TimesheetEnvelope(BaseModel):
    timesheet: TimesheetIn = Field(default_factory=TimesheetIn)

    @field_validator("timesheet", mode="before")
    @classmethod
    def null_timesheet(cls, value):
        return {} if value is None else value

class MenuEnvelope(BaseModel):
    menu: MenuIn = Field(default_factory=MenuIn)

    @field_validator("menu", mode="before")
    @classmethod
    def null_menu(cls, value):
        return {} if value is None else value

class MenuItemEnvelope(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    menu_item: MenuItemIn = Field(default_factory=MenuItemIn, alias="menuItem")

    @field_validator("menu_item", mode="before")
    @classmethod
    def null_menu_item(cls, value):
        return {} if value is None else value
