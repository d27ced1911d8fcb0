"""Framework adapters for fullquerycache."""
