"""Service layer: CMS reader, index assembly and publishing."""
