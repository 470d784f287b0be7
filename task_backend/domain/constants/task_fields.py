"""Constants for Task model field names"""


class TaskFields:
    """Field name constants for Task model"""
    USER_ID = "user_id"
    TITLE = "title"
    DESCRIPTION = "description"
    COMPLETED = "completed"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
