from django.conf import settings


def welcome_message(user_type, name, username, password, school_name):
    messages = {
        "student": (
            f"Welcome to {school_name}! Your student account has been created. "
            f"Username: {username}, Password: {password}. Please change your password after first login."
        ),
        "parent": (
            f"Welcome to {school_name}! Your parent account has been created. "
            f"Username: {username}, Password: {password}. You can now track your child's progress."
        ),
        "teacher": (
            f"Welcome to {school_name}! Your teacher account has been created. "
            f"Username: {username}, Password: {password}. Access your dashboard to manage classes."
        ),
    }
    return messages[user_type]


def parent_welcome_message(parent_name, username, password, school_name, student_names):
    student_list = ", ".join(student_names) if student_names else "your child"
    child_text = "children" if len(student_names) > 1 else "child"
    return (
        f"Welcome to {school_name}! Your parent account has been created for {student_list}. "
        f"Username: {username}, Password: {password}. You can now track your {child_text}'s progress. "
        "Please change your password after first login."
    )


def payment_confirmation_message(student_name, amount, fee_type, school_name):
    return (
        f"Payment confirmed for {student_name} at {school_name}. "
        f"Amount: {settings.CURRENCY} {amount} for {fee_type}. Thank you!"
    )


def payment_confirmation_with_balance_message(student_name, paid_amount, fee_type, school_name,
                                              remaining_balance, total_fee_amount):
    currency = settings.CURRENCY
    if remaining_balance <= 0:
        return (
            f"Payment confirmed for {student_name} at {school_name}. "
            f"Amount: {currency} {paid_amount} for {fee_type}. "
            f"Fee fully paid ({currency} {total_fee_amount}). Thank you!"
        )
    return (
        f"Payment confirmed for {student_name} at {school_name}. "
        f"Amount: {currency} {paid_amount} for {fee_type}. "
        f"Remaining balance: {currency} {remaining_balance} of {currency} {total_fee_amount}. Thank you!"
    )


def announcement_message(title, content, school_name):
    return f"{school_name} - {title}: {content}"


def event_notification_message(event_title, event_date, school_name):
    return f"{school_name} Event: {event_title} scheduled for {event_date}. Don't miss it!"


def attendance_alert_message(student_name, date, school_name):
    return (
        f"{school_name}: {student_name} was absent on {date}. "
        "Please contact the school if this is unexpected."
    )


def exam_reminder_message(exam_title, exam_date, student_name, school_name):
    return f"{school_name}: Reminder for {student_name} - {exam_title} exam on {exam_date}. Good luck!"


def sample_messages(school_name):
    """Ready-made messages for the SMS test page."""
    return [
        ("Student Welcome", welcome_message("student", "Test User", "testuser", "testpass123", school_name)),
        ("Parent Welcome", parent_welcome_message(
            "Test Parent", "testuser", "testpass123", school_name, ["John Doe", "Mary Doe"])),
        ("Payment (Partial)", payment_confirmation_with_balance_message(
            "John Doe", 500, "School Fees", school_name, 1000, 1500)),
        ("Payment (Full)", payment_confirmation_with_balance_message(
            "John Doe", 1500, "School Fees", school_name, 0, 1500)),
        ("Announcement", announcement_message(
            "Important Notice",
            "School will be closed tomorrow due to maintenance. Classes will resume on Monday.",
            school_name)),
        ("Event", event_notification_message("Sports Day", "Friday, 2nd August", school_name)),
        ("Attendance Alert", attendance_alert_message("John Doe", "30/07/2025", school_name)),
        ("Exam Reminder", exam_reminder_message("Mathematics", "Monday, 5th August", "John Doe", school_name)),
    ]
