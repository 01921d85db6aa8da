SERVICE_NAME = "producer"
