from prometheus_client import Counter, Gauge, Histogram

sync_duration_seconds = Histogram('sync_duration_seconds', 'Duration of a live status sync batch')
sync_errors_total = Counter('sync_errors_total', 'Number of sync batches aborted by a channel store failure')
last_sync_timestamp = Gauge('last_sync_timestamp', 'Unix timestamp of last completed sync')

channels_total = Gauge('channels_total', 'Number of channels checked in the last sync')
channels_live = Gauge('channels_live', 'Number of channels live in the last sync')
channel_checks_total = Counter('channel_checks_total', 'Channel checks by outcome', ['outcome'])
live_transitions_total = Counter('live_transitions_total', 'Live state changes', ['direction'])
ownership_rejections_total = Counter('ownership_rejections_total', 'Live signals rejected by ownership verification')
persist_errors_total = Counter('persist_errors_total', 'Channel status writes that failed')

CHECK_OUTCOMES = ('live', 'offline', 'error', 'ownership_failed', 'skipped')

for _outcome in CHECK_OUTCOMES:
    channel_checks_total.labels(outcome=_outcome)
