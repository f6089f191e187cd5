"""Webcam face detection with Male/Female labelling."""
