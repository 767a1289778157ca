"""Scheduled CPU utilization check that publishes an alert on breach."""
