#!/usr/bin/env python3
"""Basic usage example"""

from slogger import (
    LogLevel,
    LoggerBuilder,
    new_async_logger,
    new_logger,
    shutdown_default_pipeline,
    with_dir,
    with_max_backups,
)

def main():
    # Synchronous logger: handlers run on the calling thread
    logger = new_logger(with_dir("logs/example"), with_max_backups(5))

    logger.debug("This is debug")                # console only
    logger.info("Application started", pid=123)  # console only
    logger.warn("Disk space low", free_mb=512)   # console and logs/example/app.log
    logger.error("Request failed", status=500)

    # Asynchronous logger: handlers run on the shared background worker
    async_logger = new_async_logger(with_dir("logs/example"))
    async_logger.error("Delivered by the background worker")

    # Builder with a lower file threshold
    verbose = (LoggerBuilder()
        .with_dir("logs/example")
        .with_file("verbose.log")
        .with_file_level(LogLevel.INFO)
        .build())
    verbose.info("Also written to verbose.log")

    # Drain the background worker before closing handlers
    shutdown_default_pipeline()
    for log in (logger, async_logger, verbose):
        log.shutdown()

if __name__ == "__main__":
    main()
