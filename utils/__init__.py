# Utils package for the bazaar backend
