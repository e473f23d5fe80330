"""Static Clio values shared by the transport, resources and trigger."""

API_ENDPOINTS: dict[str, str] = {
    "us": "https://app.clio.com/api/v4",
    "eu": "https://eu.app.clio.com/api/v4",
    "ca": "https://ca.app.clio.com/api/v4",
    "au": "https://au.app.clio.com/api/v4",
}

OAUTH_HOSTS: dict[str, str] = {
    "us": "https://app.clio.com",
    "eu": "https://eu.app.clio.com",
    "ca": "https://ca.app.clio.com",
    "au": "https://au.app.clio.com",
}

DEFAULT_REGION = "us"

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 200
MAX_PAGES = 1000

CREDENTIAL_NAME = "clioOAuth2Api"

REGIONS = [
    {"name": "United States", "value": "us"},
    {"name": "European Union", "value": "eu"},
    {"name": "Canada", "value": "ca"},
    {"name": "Australia", "value": "au"},
]

MATTER_STATUSES = [
    {"name": "Open", "value": "Open"},
    {"name": "Pending", "value": "Pending"},
    {"name": "Closed", "value": "Closed"},
]

CONTACT_TYPES = [
    {"name": "Person", "value": "Person"},
    {"name": "Company", "value": "Company"},
]

ACTIVITY_TYPES = [
    {"name": "TimeEntry", "value": "TimeEntry"},
    {"name": "ExpenseEntry", "value": "ExpenseEntry"},
]

BILL_STATES = [
    {"name": "Draft", "value": "draft"},
    {"name": "Awaiting Approval", "value": "awaiting_approval"},
    {"name": "Awaiting Payment", "value": "awaiting_payment"},
    {"name": "Paid", "value": "paid"},
    {"name": "Void", "value": "void"},
]

TASK_PRIORITIES = [
    {"name": "High", "value": "High"},
    {"name": "Normal", "value": "Normal"},
    {"name": "Low", "value": "Low"},
]

TASK_STATUSES = [
    {"name": "Pending", "value": "pending"},
    {"name": "Complete", "value": "complete"},
]

CALENDAR_ENTRY_TYPES = [
    {"name": "Appointment", "value": "Appointment"},
    {"name": "Court Date", "value": "CourtDate"},
    {"name": "Deadline", "value": "Deadline"},
    {"name": "Task", "value": "Task"},
]

COMMUNICATION_TYPES = [
    {"name": "Email", "value": "Email"},
    {"name": "Phone Call", "value": "PhoneCall"},
    {"name": "Letter", "value": "Letter"},
    {"name": "Fax", "value": "Fax"},
    {"name": "Meeting", "value": "Meeting"},
    {"name": "Other", "value": "Other"},
]

TRUST_TRANSACTION_TYPES = [
    {"name": "Deposit", "value": "deposit"},
    {"name": "Withdrawal", "value": "withdrawal"},
    {"name": "Transfer", "value": "transfer"},
]

CUSTOM_FIELD_TYPES = [
    {"name": "Text Line", "value": "text_line"},
    {"name": "Text Area", "value": "text_area"},
    {"name": "Checkbox", "value": "checkbox"},
    {"name": "Date", "value": "date"},
    {"name": "Currency", "value": "currency"},
    {"name": "Number", "value": "number"},
    {"name": "Picklist", "value": "picklist"},
    {"name": "Contact", "value": "contact"},
    {"name": "Matter", "value": "matter"},
    {"name": "URL", "value": "url"},
    {"name": "Email", "value": "email"},
]

WEBHOOK_EVENTS = [
    {"name": "Matter Created", "value": "matter.created"},
    {"name": "Matter Updated", "value": "matter.updated"},
    {"name": "Matter Deleted", "value": "matter.deleted"},
    {"name": "Contact Created", "value": "contact.created"},
    {"name": "Contact Updated", "value": "contact.updated"},
    {"name": "Contact Deleted", "value": "contact.deleted"},
    {"name": "Activity Created", "value": "activity.created"},
    {"name": "Activity Updated", "value": "activity.updated"},
    {"name": "Activity Deleted", "value": "activity.deleted"},
    {"name": "Bill Created", "value": "bill.created"},
    {"name": "Bill Updated", "value": "bill.updated"},
    {"name": "Bill Deleted", "value": "bill.deleted"},
    {"name": "Task Created", "value": "task.created"},
    {"name": "Task Updated", "value": "task.updated"},
    {"name": "Task Completed", "value": "task.completed"},
    {"name": "Calendar Entry Created", "value": "calendar_entry.created"},
    {"name": "Calendar Entry Updated", "value": "calendar_entry.updated"},
    {"name": "Document Created", "value": "document.created"},
    {"name": "Document Updated", "value": "document.updated"},
    {"name": "Note Created", "value": "note.created"},
    {"name": "Communication Created", "value": "communication.created"},
    {"name": "Payment Created", "value": "payment.created"},
]

WEBHOOK_VERIFICATION_TYPE = "webhook.verification"
TIMESTAMP_HEADER = "x-clio-timestamp"
