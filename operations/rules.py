from pymongo import ReturnDocument


class Rules:

    # single document operations

    @staticmethod
    def add(data, db, collection):
        return db[collection].insert_one(data).inserted_id

    @staticmethod
    def get(query, db, collection, projection=None):
        return db[collection].find_one(query, projection)

    @staticmethod
    def update(query, data, db, collection, upsert=False):
        return db[collection].update_one(query, data, upsert=upsert)

    @staticmethod
    def get_and_update(query, data, db, collection, projection=None):
        return db[collection].find_one_and_update(
            query,
            data,
            projection=projection,
            return_document=ReturnDocument.AFTER
        )

    @staticmethod
    def delete(query, db, collection):
        return db[collection].delete_one(query)

    # multiple document operations

    @staticmethod
    def get_many(query, db, collection):
        return list(db[collection].find(query))

    @staticmethod
    def delete_many(query, db, collection):
        return db[collection].delete_many(query)
