"""Controller module that fails while importing."""

raise RuntimeError("controller module failed to import")
