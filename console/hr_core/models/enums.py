from django.db import models


class RequestKind(models.TextChoices):
    LEAVE = "LEAVE", "Leave"
    TRANSFER = "TRANSFER", "Project transfer"
    ALLOWANCE = "ALLOWANCE", "Salary allowance"
    LOAN_POSTPONEMENT = "LOAN_POSTPONEMENT", "Loan installment postponement"


class RequestStatus(models.TextChoices):
    NEW = "NEW", "New"
    IN_PROCESS = "IN_PROCESS", "In process"
    APPROVED = "APPROVED", "Approved"
    REJECTED = "REJECTED", "Rejected"


TERMINAL_STATUSES = frozenset({RequestStatus.APPROVED, RequestStatus.REJECTED})


class Decision(models.TextChoices):
    APPROVE = "APPROVE", "Approve"
    REJECT = "REJECT", "Reject"


class Priority(models.TextChoices):
    HIGH = "HIGH", "High"
    MEDIUM = "MEDIUM", "Medium"
    LOW = "LOW", "Low"


class EmployeeCategory(models.TextChoices):
    SAUDI = "S", "Saudi"
    FOREIGN = "F", "Foreign"


class AllowanceAmountType(models.TextChoices):
    AMOUNT = "AMOUNT", "Fixed amount"
    PERCENTAGE = "PERCENTAGE", "Percentage of salary"


class HolidayType(models.TextChoices):
    FITR = "FITR", "Eid Al-Fitr"
    ADHA = "ADHA", "Eid Al-Adha"
    NATIONAL = "NATIONAL", "National Holiday"
    FOUNDATION = "FOUNDATION", "Foundation Day"
    CUSTOM = "CUSTOM", "Custom Holiday"
