# helpers shared across the package: logging, config, persistence
