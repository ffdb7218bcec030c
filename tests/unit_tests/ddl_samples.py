# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Sample DDL shared by the unit tests.
"""

MYSQL_USERS_DDL = """
CREATE TABLE IF NOT EXISTS `users` (
  `id` BIGINT NOT NULL AUTO_INCREMENT COMMENT '主键',
  `username` VARCHAR(64) NOT NULL COMMENT '用户名',
  `email` VARCHAR(128) DEFAULT NULL COMMENT '邮箱',
  `status` TINYINT(1) NOT NULL DEFAULT '1' COMMENT '状态（0：禁用、1：启用）',
  `balance` DECIMAL(10,2) DEFAULT '0.00',
  `created_at` DATETIME DEFAULT CURRENT_TIMESTAMP,
  `updated_at` TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP COMMENT '更新时间',
  PRIMARY KEY (`id`),
  UNIQUE KEY `uk_email` (`email`),
  KEY `idx_status` (`status`)
) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COMMENT='用户表';
"""

POSTGRES_POSTS_DDL = """
CREATE TABLE public.posts (
    id SERIAL PRIMARY KEY,
    title VARCHAR(200) NOT NULL,
    body TEXT,
    tags TEXT[],
    score DOUBLE PRECISION DEFAULT 0,
    published BOOL DEFAULT false,
    created_at TIMESTAMP WITH TIME ZONE DEFAULT now()
);

COMMENT ON TABLE public.posts IS '文章表';
COMMENT ON COLUMN public.posts.title IS '标题';
COMMENT ON COLUMN posts.body IS 'It''s the body';
COMMENT ON COLUMN posts.missing IS '不存在';
COMMENT ON COLUMN other.id IS '不存在';
"""

TWO_TABLES_DDL = """
CREATE TABLE users (id INT PRIMARY KEY, name VARCHAR(50));
CREATE TABLE posts (id INT PRIMARY KEY, title VARCHAR(100) NOT NULL);
COMMENT ON COLUMN posts.title IS '标题';
"""
