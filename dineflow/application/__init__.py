"""Application services, request and response models, and the unit of work."""