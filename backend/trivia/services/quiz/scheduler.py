from trivia import socketio


def run_eviction_sweep(app) -> int:
    """Remove sessions older than SESSION_RETENTION_SEC from the app's store."""
    store = app.extensions['session_store']
    retention = int(app.config.get('SESSION_RETENTION_SEC', 3600))
    removed = store.evict_older_than(retention)
    app.logger.info(f"[sweep] retention={retention}s removed={removed} live={len(store)}")
    return removed


def schedule_eviction(app) -> bool:
    """Start the periodic eviction sweep as a background task.

    - No-ops in TESTING mode unless ENABLE_SCHEDULER_IN_TESTS is set
    - Ensures a single sweeper per app
    Returns True when a sweeper was started.
    """
    if app.config.get('TESTING') and not app.config.get('ENABLE_SCHEDULER_IN_TESTS'):
        return False
    interval = int(app.config.get('EVICTION_INTERVAL_SEC', 3600))
    if interval < 1:
        raise ValueError(f'EVICTION_INTERVAL_SEC must be at least 1, got {interval}')
    if app.extensions.get('eviction_scheduled'):
        app.logger.info("[sweep-skip] eviction already scheduled")
        return False
    app.extensions['eviction_scheduled'] = True

    app.logger.info(f"[sweep-set] interval={interval}s")

    def _worker(delay: int):
        while True:
            socketio.sleep(delay)
            with app.app_context():
                try:
                    run_eviction_sweep(app)
                except Exception:
                    app.logger.exception("[sweep-error] eviction sweep failed")

    socketio.start_background_task(_worker, interval)
    return True
