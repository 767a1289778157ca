class Namespaces:
    """CloudWatch namespaces the dashboard reads from."""

    # Built-in hypervisor-level metrics
    EC2 = "AWS/EC2"

    # Reported by the CloudWatch agent on the instance
    CW_AGENT = "CWAgent"

    # Application counters relayed by the agent's StatsD listener
    STATSD = "StatsD"


class Statistics:
    """CloudWatch statistic names."""

    AVERAGE = "Average"
    SUM = "Sum"
    MINIMUM = "Minimum"
    MAXIMUM = "Maximum"
    SAMPLE_COUNT = "SampleCount"

    @classmethod
    def all_statistics(cls) -> list[str]:
        return [cls.AVERAGE, cls.SUM, cls.MINIMUM, cls.MAXIMUM, cls.SAMPLE_COUNT]
