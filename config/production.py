import os

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

OFFICE_SHIFT_NAME = os.getenv("OFFICE_SHIFT_NAME", "Office")
OFFICE_START_TIME = os.getenv("OFFICE_START_TIME", "09:00")
OFFICE_END_TIME = os.getenv("OFFICE_END_TIME", "20:00")
WORKING_HOURS_PER_DAY = os.getenv("WORKING_HOURS_PER_DAY", "11")
DAYS_PER_MONTH = os.getenv("DAYS_PER_MONTH", "30")
