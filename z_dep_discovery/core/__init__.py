"""Process, logging and other plumbing shared by all builders."""
