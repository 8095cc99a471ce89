#!/usr/bin/env python3
"""Basic usage example"""

from simplelog import LoggerBuilder, Severity, here


def main():
    # Everything goes to the file, WARN and above to the console
    logger = (LoggerBuilder()
        .with_name("example")
        .with_threshold(Severity.WARN)
        .with_console(colored=True)
        .with_file("logs/example.log")
        .with_flush_interval(200)
        .build())

    # Log messages
    logger.info("Application started")
    logger.ann("Listening on port 8080")
    logger.warn("Low disk space", source_location=here())
    logger.error("Crash")

    # Module handles tag every entry with their name
    storage = logger.create_module("storage")
    storage.info("Mounted /data")
    storage.error("Write failed")

    # Flush and shutdown
    logger.flush()
    logger.shutdown()


if __name__ == "__main__":
    main()
