"""Text buffer with cursor tracking and grouped undo/redo history."""