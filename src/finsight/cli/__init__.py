"""Line-based command interface for finsight."""
