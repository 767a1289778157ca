class AlertSubjects:
    """Subject lines used on the notification topic."""

    MANUAL = "Manual EC2 Alert"
    CPU_THRESHOLD = "EC2 CPU Utilization Alert"


# Hourly average CPU utilization (percent) above which the scheduled check alerts
CPU_THRESHOLD_PERCENT = 80.0
