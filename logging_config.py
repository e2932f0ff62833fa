"""
Sets up logging for the tiling generator.
"""


import logging
import sys


def setup_logging(level=logging.INFO, log_file=None):
	"""
	Configures the root logger to write to stdout (and optionally a file).

	Arguments:
	  level             The logging level, eg logging.DEBUG
	  log_file          Path of a file to which the log is also written.
	                    Not written if unspecified.
	"""
	logger = logging.getLogger()
	logger.setLevel(level)
	# Avoid duplicate output if called more than once
	for handler in list(logger.handlers):
		logger.removeHandler(handler)
		handler.close()
	formatter = logging.Formatter(
		"%(asctime)s - %(name)s - %(levelname)s - %(message)s",
		datefmt="%H:%M:%S")
	console_handler = logging.StreamHandler(sys.stdout)
	console_handler.setLevel(level)
	console_handler.setFormatter(formatter)
	logger.addHandler(console_handler)
	if log_file:
		file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
		file_handler.setLevel(level)
		file_handler.setFormatter(formatter)
		logger.addHandler(file_handler)
	logging.getLogger(__name__).debug("Logging initialised")
