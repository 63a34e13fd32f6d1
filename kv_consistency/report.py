def format_report(counters, outages):
    """
        One summary line. Field order is stable so the output can be piped
        through grep/awk; optional fields are only present when meaningful.
    """
    report = (
        f"{counters.reads} R ({counters.failed_reads} err) | "
        f"{counters.writes} W ({counters.failed_writes} err) | "
    )
    if counters.lost_writes > 0:
        report += f"{counters.lost_writes} lost | "
    if counters.not_ack_writes > 0:
        report += f"{counters.not_ack_writes} noack | "
    if outages.history:
        last_outage, longest_outage = outages.last, outages.longest
        report += f"last outage {last_outage}s | "
        if last_outage != longest_outage:
            report += f"longest outage {longest_outage}s | "
    return report
