# Services package init
"""
Schedule API — Services Package
================================

What:  Business logic layer between routes and the database.

Service Inventory:
    - schedule_service.py: ScheduleService (get / add / remove schedule entries)
    - feedback_service.py: FeedbackService (list / get / create feedback)

Each service method takes the request's AsyncSession as its first argument
and issues a single statement.
"""
