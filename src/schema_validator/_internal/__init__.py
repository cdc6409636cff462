"""Internal collaborators: Avro parsing and resolution, registry I/O, discovery, reporting."""
