"""Example usage of the console logger."""

from termkit import Logger


def main() -> None:
    """Walk through levels, formats and separators."""
    logger = Logger({"format": "Logger: %s"})
    logger.log("This is log message")
    logger.info("This is info message")
    logger.error("This is error message")

    # Custom formatter
    logger.info("My name is %s and my salary is: %d", "Deepak", 2000)
    logger.warn("My name is %s and my salary is: %d", "Deepak", 2000)
    logger.error("My name is %s and my salary is: %d", "Deepak", 2000)

    # Warnings and errors only
    logger.level = 2
    logger.info("My name is %s and my salary is: %d", "Deepak", 2000)  # This won't print
    logger.warn("My name is %s and my salary is: %d", "Deepak", 2000)

    logger.inverse("This is inverse!!")
    logger.line()
    logger.line("This will print inside line")

    try:
        logger.level = 5
    except ValueError as e:
        print(f"Expected error: {e}")

    # Change default format
    logger.level = 1
    logger.format = "This is something new version: %s"
    logger.info("1.0.1")
    logger.warn("1.0.2")

    logger.raw("This is something new raw")
    logger.raw("This is something new version", Logger.COLORS.GREEN, False)

    print("\n=======================\n")

    # Detached methods stay bound to their logger
    logger.format = "De-Structure: %s"
    inverse, log_error = logger.inverse, logger.error
    inverse("This is inverse")
    log_error("This is Error.")


if __name__ == "__main__":
    main()
