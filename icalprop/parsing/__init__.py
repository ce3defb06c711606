"""Library for the raw output of an rfc5545 content line tokenizer."""
